"""Built-in capabilities shipped with drab_commander.

``core`` is mandatory; ``query`` and ``modal`` are active by default.
"""

from __future__ import annotations

from typing import Tuple

from ..base.capabilities import Capability
from .core import CAPABILITY as CORE
from .modal import CAPABILITY as MODAL
from .query import CAPABILITY as QUERY


def builtin_capabilities() -> Tuple[Capability, ...]:
    """Return the built-in capabilities, mandatory one first."""
    return (CORE, QUERY, MODAL)


__all__ = ["CORE", "QUERY", "MODAL", "builtin_capabilities"]
