"""
Raised when a capability name does not resolve in the capability registry.
"""
from __future__ import annotations

from typing import Optional

from .commander_error import CommanderError
from .error_code import ErrorCode


class UnknownCapability(CommanderError):
    """Unresolvable capability name; fatal to composition.

    Attributes:
        capability: The capability name that failed to resolve.
    """

    def __init__(self, capability: str, commander: Optional[str] = None) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_CAPABILITY,
            message=f"unknown capability {capability!r}",
            commander=commander,
        )
        self.capability = capability


__all__ = ["UnknownCapability"]
