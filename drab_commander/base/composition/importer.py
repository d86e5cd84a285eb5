"""Capability importer: installs capability operations on a commander class.

Every name is resolved before the class is touched, so an unknown capability
leaves the class exactly as it was. Operations are installed as
``staticmethod`` so they are callable from the class and from instances.
Names the class or a user superclass declares are never replaced; among
capabilities the later import wins.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from ...config.defaults import IMPORTS_ATTR, MANDATORY_CAPABILITY
from ..capabilities import Capability, CapabilityRegistry, get_default_registry
from ..dto import Configuration
from ..log_support import LogContext
from ..logging import get_logger, log_event
from .naming import commander_name

logger = get_logger("drab.composition")


def _import_order(modules: Tuple[str, ...]) -> Tuple[str, ...]:
    return (MANDATORY_CAPABILITY,) + tuple(m for m in modules if m != MANDATORY_CAPABILITY)


def _imports_ledger(host: type) -> Dict[str, str]:
    ledger = vars(host).get(IMPORTS_ATTR)
    if ledger is None:
        ledger = {}
        setattr(host, IMPORTS_ATTR, ledger)
    return ledger


def _declared_by_user(host: type, op_name: str) -> bool:
    """True when the nearest definition of ``op_name`` in the MRO was written by hand.

    A definition recorded in its class's imports ledger came from a capability
    and may be replaced; anything else, on the host or a user superclass, wins.
    """
    for klass in host.__mro__[:-1]:
        own = vars(klass)
        if op_name in own:
            return op_name not in own.get(IMPORTS_ATTR, {})
    return False


def activate(
    host: type,
    configuration: Configuration,
    registry: Optional[CapabilityRegistry] = None,
) -> Tuple[Capability, ...]:
    """Make the operations of every active capability callable on ``host``.

    Returns the resolved capabilities in import order.

    Raises:
        UnknownCapability: If a name in ``configuration.modules`` is not
            registered; ``host`` is left unmodified.
    """
    registry = registry or get_default_registry()
    name = commander_name(host)
    resolved = tuple(registry.resolve(m, commander=name) for m in _import_order(configuration.modules))

    ledger = _imports_ledger(host)
    for capability in resolved:
        for op_name, op in capability.operations.items():
            if _declared_by_user(host, op_name):
                log_event(
                    logger,
                    "compose.import_shadowed",
                    LogContext(commander=name, capability=capability.name),
                    level=logging.DEBUG,
                    operation=op_name,
                )
                continue
            setattr(host, op_name, staticmethod(op))
            ledger[op_name] = capability.name
    return resolved


__all__ = ["activate"]
