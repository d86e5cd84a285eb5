"""Declarative commander surfaces.

A commander keeps the event handlers of a live page. Capabilities and
callbacks are declared on the class statement itself::

    class PageCommander(Commander, modules=["query"], onload="page_loaded"):
        def page_loaded(self, socket):
            self.execjs(socket, "console.log('loaded')")

        def click_button_handler(self, socket, sender):
            self.update(socket, "#out", "text", sender["val"])

Plain classes can use the :func:`commander` decorator instead. Both run the
composition pipeline once, while the class is being defined.
"""
from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar, overload

from .capabilities import CapabilityRegistry
from .composition import compose

T = TypeVar("T", bound=type)


class Commander:
    """Base class composing each subclass from its class keywords.

    ``registry=`` selects a capability registry other than the default one;
    every other keyword is a commander option.
    """

    def __init_subclass__(cls, registry: Optional[CapabilityRegistry] = None, **options: Any) -> None:
        super().__init_subclass__()
        compose(cls, options, registry=registry)


@overload
def commander(host: T, /) -> T: ...


@overload
def commander(*, registry: Optional[CapabilityRegistry] = None, **options: Any) -> Callable[[T], T]: ...


def commander(host: Any = None, /, *, registry: Optional[CapabilityRegistry] = None, **options: Any) -> Any:
    """Class decorator composing ``host`` with ``options``.

    Usable bare (``@commander``) for the default configuration or called
    (``@commander(modules=[...])``).
    """

    def wrap(cls: T) -> T:
        compose(cls, options, registry=registry)
        return cls

    return wrap if host is None else wrap(host)


__all__ = ["Commander", "commander"]
