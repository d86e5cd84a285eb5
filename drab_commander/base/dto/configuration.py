"""
Immutable per-commander configuration record.

Purpose
-------
A ``Configuration`` is what a commander's generated accessor returns: the
owning class, the ordered set of active capability names, the lifecycle
callback bindings and the whitelist of session keys inherited into the
runtime store. It is built once per commander by the merger and never
mutated afterwards.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` (``frozen=True``) for validation and
  assignment protection.

Failure modes
-------------
- Wrong value types raise ``pydantic.ValidationError``; the merger converts
  that into a ``CommanderError`` with the ``validation`` code.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...config.defaults import CALLBACK_OPTIONS, DEFAULT_MODULES, MANDATORY_CAPABILITY


def with_mandatory(modules: Tuple[str, ...]) -> Tuple[str, ...]:
    """Return ``modules`` de-duplicated, with the mandatory capability first.

    Order of the remaining names is preserved (first occurrence wins).
    """
    ordered = [MANDATORY_CAPABILITY]
    for name in modules:
        if name not in ordered:
            ordered.append(name)
    return tuple(ordered)


class Configuration(BaseModel):
    """Merged, immutable configuration of one commander class.

    Attributes
    ----------
    commander:
        The commander class this configuration belongs to. ``None`` only on
        the baseline returned by :func:`defaults`.
    modules:
        Active capability names; never empty, mandatory capability first.
    onload, onconnect, ondisconnect:
        Names of handler functions on the commander, or ``None``. A callable
        is accepted and stored by its ``__name__``.
    inherit_session:
        Session keys copied read-only into the runtime store on page load.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    commander: Any = None
    modules: Tuple[str, ...] = DEFAULT_MODULES
    onload: Optional[str] = None
    onconnect: Optional[str] = None
    ondisconnect: Optional[str] = None
    inherit_session: FrozenSet[str] = Field(default_factory=frozenset)

    @field_validator("onload", "onconnect", "ondisconnect", mode="before")
    @classmethod
    def _callback_name(cls, value: Any) -> Any:
        if callable(value) and hasattr(value, "__name__"):
            return value.__name__
        return value

    @field_validator("modules", mode="after")
    @classmethod
    def _mandatory_first(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return with_mandatory(value)

    @property
    def callbacks(self) -> Mapping[str, str]:
        """Read-only view of the bound lifecycle callbacks (unbound ones omitted)."""
        bound = {name: getattr(self, name) for name in CALLBACK_OPTIONS}
        return MappingProxyType({k: v for k, v in bound.items() if v is not None})


_DEFAULTS = Configuration()


def defaults() -> Configuration:
    """Return the fixed baseline configuration.

    Mandatory capability plus the two default optional capabilities, no
    callbacks, empty inheritable-session set, no commander.
    """
    return _DEFAULTS


__all__ = ["Configuration", "defaults", "with_mandatory"]
