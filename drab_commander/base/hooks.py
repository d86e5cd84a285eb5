"""Lookups used by the transport and callback dispatcher.

Everything here reads a commander's configuration through its generated
accessor; nothing is cached or stored elsewhere.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional

from ..config.defaults import ACCESSOR_NAME, CALLBACK_OPTIONS, REGISTRY_ATTR
from .capabilities import CapabilityRegistry, get_default_registry
from .composition.naming import commander_name
from .dto import Configuration
from .errors import CommanderError, ErrorCode, UnrecognizedOption


def _host_of(target: Any) -> type:
    return target if isinstance(target, type) else type(target)


def is_commander(target: Any) -> bool:
    """Return True if ``target`` (class or instance) has been composed."""
    return callable(getattr(_host_of(target), ACCESSOR_NAME, None))


def config_of(target: Any) -> Configuration:
    """Return the configuration of a commander class or instance.

    Raises:
        CommanderError: ``not_found`` when ``target`` is not a commander.
    """
    host = _host_of(target)
    accessor = getattr(host, ACCESSOR_NAME, None)
    if not callable(accessor):
        raise CommanderError(
            code=ErrorCode.NOT_FOUND,
            message="not a commander: no configuration accessor",
            commander=commander_name(host),
        )
    return accessor()


def callback_for(target: Any, event: str) -> Optional[Callable[..., Any]]:
    """Return the handler bound to lifecycle ``event``, or None.

    When ``target`` is an instance the handler is returned bound to it.
    None is returned when no callback is configured for ``event`` or the
    configured name is not defined on the commander.

    Raises:
        UnrecognizedOption: If ``event`` is not a lifecycle callback name.
    """
    if event not in CALLBACK_OPTIONS:
        raise UnrecognizedOption(event, commander=commander_name(_host_of(target)))
    name = config_of(target).callbacks.get(event)
    if name is None:
        return None
    handler = getattr(target, name, None)
    return handler if callable(handler) else None


def inherited_session(target: Any, session: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy the whitelisted session keys present in ``session`` into a new dict."""
    allowed = config_of(target).inherit_session
    return {k: v for k, v in session.items() if k in allowed}


def enabled_templates(target: Any, registry: Optional[CapabilityRegistry] = None) -> List[str]:
    """Return browser template names of the commander's active capabilities.

    Without an explicit ``registry`` the one the commander was composed
    against is used, falling back to the default registry.
    """
    registry = registry or getattr(_host_of(target), REGISTRY_ATTR, None) or get_default_registry()
    return registry.templates_for(config_of(target).modules)


__all__ = ["is_commander", "config_of", "callback_for", "inherited_session", "enabled_templates"]
