"""Shared testing utilities for composition and capability tests.

Exports:
    - assert_true(condition: bool, message: str) -> None
    - FakeSocket: in-memory stand-in for the live-page transport.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple


def assert_true(condition: bool, message: str) -> None:
    """Raise AssertionError with the provided message if condition is False.

    Parameters
    ----------
    condition: bool
        Boolean expression under test.
    message: str
        Rich, contextual diagnostic message to display on failure.

    Raises
    ------
    AssertionError
        If `condition` evaluates false.
    """
    if not condition:
        raise AssertionError(message)


class FakeSocket:
    """Records pushed events and answers with a canned reply."""

    def __init__(self, reply: Any = None, session: Optional[Dict[str, Any]] = None) -> None:
        self.reply = reply
        self.store: Dict[str, Any] = {}
        self.session: Dict[str, Any] = dict(session or {})
        self.pushed: List[Tuple[str, Dict[str, Any]]] = []

    def push(self, event: str, payload: Dict[str, Any]) -> Any:
        self.pushed.append((event, payload))
        return self.reply

    @property
    def last_js(self) -> str:
        return self.pushed[-1][1]["js"]
