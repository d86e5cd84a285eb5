"""
Structured commander error exception type.

Carries a normalized `ErrorCode` so callers and log handlers can branch on
the failure category instead of parsing messages.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class CommanderError(Exception):
    """Represents a structured composition error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        commander: Qualified name of the commander class being composed, if any.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    commander: Optional[str] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining commander, code, and message."""
        return f"{self.commander or '-'} {self.code.value}: {self.message}"


__all__ = ["CommanderError"]
