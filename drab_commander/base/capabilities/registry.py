"""Capability registry for resolving capability names.

Provides registration, lookup and template queries over the catalog of
capabilities a commander may activate, plus the process-wide default
registry populated with the built-in capabilities.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional

from ...config.defaults import MANDATORY_CAPABILITY
from ..errors import CommanderError, ErrorCode, UnknownCapability
from ..log_support import LogContext
from ..logging import get_logger, log_event
from .capability import Capability


class CapabilityRegistry:
    """Catalog mapping capability names to capabilities.

    This registry provides:
    - Capability registration and removal
    - Name resolution for the composition pipeline
    - Template queries for the transport layer

    Writes are serialized by a lock; lookups are plain dictionary reads.

    Attributes:
        capabilities: Mapping of capability name to capability.
        logger: Structured logger instance.
    """

    def __init__(self, capabilities: Iterable[Capability] = ()) -> None:
        """Initialize a registry, optionally pre-populated."""
        self.capabilities: Dict[str, Capability] = {}
        self._lock = threading.Lock()
        self.logger = get_logger("drab.registry")
        for capability in capabilities:
            self.register(capability)

    def register(self, capability: Capability) -> None:
        """Register a capability under its name.

        Raises:
            CommanderError: ``conflict`` if the name is already registered.
        """
        with self._lock:
            if capability.name in self.capabilities:
                raise CommanderError(
                    code=ErrorCode.CONFLICT,
                    message=f"capability {capability.name!r} already registered",
                )
            self.capabilities[capability.name] = capability
        log_event(
            self.logger,
            "registry.register",
            LogContext(capability=capability.name),
            operations=sorted(capability.operations),
            template=capability.template,
        )

    def unregister(self, name: str) -> None:
        """Remove a capability.

        Raises:
            CommanderError: ``not_found`` for unknown names, ``conflict`` for
                the mandatory capability.
        """
        if name == MANDATORY_CAPABILITY:
            raise CommanderError(
                code=ErrorCode.CONFLICT,
                message=f"mandatory capability {name!r} cannot be unregistered",
            )
        with self._lock:
            if name not in self.capabilities:
                raise CommanderError(
                    code=ErrorCode.NOT_FOUND,
                    message=f"capability {name!r} not registered",
                )
            del self.capabilities[name]
        log_event(self.logger, "registry.unregister", LogContext(capability=name))

    def get(self, name: str) -> Optional[Capability]:
        """Return the capability registered under ``name`` or None."""
        return self.capabilities.get(name)

    def resolve(self, name: str, commander: Optional[str] = None) -> Capability:
        """Return the capability registered under ``name``.

        Args:
            name: Capability name.
            commander: Qualified commander name, reported on failure.

        Raises:
            UnknownCapability: If ``name`` is not registered.
        """
        capability = self.capabilities.get(name)
        if capability is None:
            raise UnknownCapability(name, commander=commander)
        return capability

    def names(self) -> List[str]:
        """List registered capability names in registration order."""
        return list(self.capabilities)

    def templates_for(self, modules: Iterable[str]) -> List[str]:
        """Return template names of ``modules`` in order, skipping those without one.

        Raises:
            UnknownCapability: If a name in ``modules`` is not registered.
        """
        templates = []
        for name in modules:
            template = self.resolve(name).template
            if template:
                templates.append(template)
        return templates

    def __contains__(self, name: object) -> bool:
        return name in self.capabilities


_DEFAULT_REGISTRY: Optional[CapabilityRegistry] = None
_DEFAULT_LOCK = threading.Lock()


def get_default_registry() -> CapabilityRegistry:
    """Return the process-wide registry, populating the built-ins on first use."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        with _DEFAULT_LOCK:
            if _DEFAULT_REGISTRY is None:
                # Lazy import keeps base free of the built-in capability package.
                from ...capabilities import builtin_capabilities

                _DEFAULT_REGISTRY = CapabilityRegistry(builtin_capabilities())
    return _DEFAULT_REGISTRY


def set_default_registry(registry: Optional[CapabilityRegistry]) -> None:
    """Replace the process-wide registry; ``None`` rebuilds it lazily.

    Side effects:
        Mutates module-level state.
    """
    global _DEFAULT_REGISTRY
    with _DEFAULT_LOCK:
        _DEFAULT_REGISTRY = registry


__all__ = ["CapabilityRegistry", "get_default_registry", "set_default_registry"]
