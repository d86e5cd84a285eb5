"""
Raised when a commander declaration carries an option key outside the
recognized set, or a collaborator asks for an unknown lifecycle event.
"""
from __future__ import annotations

from typing import Hashable, Optional

from .commander_error import CommanderError
from .error_code import ErrorCode


class UnrecognizedOption(CommanderError):
    """Unknown option key; fatal to composition.

    Attributes:
        option: The offending key exactly as supplied.
    """

    def __init__(self, option: Hashable, commander: Optional[str] = None) -> None:
        super().__init__(
            code=ErrorCode.UNRECOGNIZED_OPTION,
            message=f"unrecognized option {option!r}",
            commander=commander,
        )
        self.option = option


__all__ = ["UnrecognizedOption"]
