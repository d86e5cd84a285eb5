"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `drab_commander.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .commander_error import CommanderError
from .unrecognized_option import UnrecognizedOption
from .unknown_capability import UnknownCapability

__all__ = ["ErrorCode", "CommanderError", "UnrecognizedOption", "UnknownCapability"]
