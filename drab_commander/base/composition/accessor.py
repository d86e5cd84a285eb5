"""Accessor generator: installs the zero-argument configuration getter once.

The accessor name (``__drab__``) is a dunder so it cannot collide with
event-handler names. If the class already has it, either itself or through a
superclass, installation is skipped silently.
"""
from __future__ import annotations

import logging

from ...config.defaults import ACCESSOR_NAME
from ..dto import Configuration
from ..log_support import LogContext
from ..logging import get_logger, log_event
from .naming import commander_name

logger = get_logger("drab.composition")


def ensure_accessor(host: type, configuration: Configuration) -> bool:
    """Install ``host.__drab__()`` returning ``configuration`` unless present.

    Returns:
        bool: True if the accessor was installed by this call.
    """
    if hasattr(host, ACCESSOR_NAME):
        log_event(
            logger,
            "compose.accessor_present",
            LogContext(commander=commander_name(host)),
            level=logging.DEBUG,
        )
        return False

    def accessor() -> Configuration:
        return configuration

    accessor.__name__ = ACCESSOR_NAME
    accessor.__qualname__ = f"{host.__qualname__}.{ACCESSOR_NAME}"
    setattr(host, ACCESSOR_NAME, staticmethod(accessor))
    return True


__all__ = ["ensure_accessor"]
