"""
Normalized commander error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the composition pipeline and the
capability registry. Values are lowercase snake_case and are considered a
stable public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    UNRECOGNIZED_OPTION = "unrecognized_option"
    UNKNOWN_CAPABILITY = "unknown_capability"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"


__all__ = ["ErrorCode"]
