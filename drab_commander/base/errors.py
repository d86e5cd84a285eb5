"""Unified commander error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``drab_commander.base.errors_parts`` to maintain a stable import path while
enforcing the one-class-per-file governance rule.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.commander_error import CommanderError
from .errors_parts.unrecognized_option import UnrecognizedOption
from .errors_parts.unknown_capability import UnknownCapability

__all__ = ["ErrorCode", "CommanderError", "UnrecognizedOption", "UnknownCapability"]
