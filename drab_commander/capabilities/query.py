"""Query capability: jQuery-style DOM reads and writes.

Every operation compiles to a single jQuery expression that is run through
the core ``execjs`` operation. Selectors and values are JSON-quoted so they
reach the browser verbatim.
"""

from __future__ import annotations

import json
from typing import Any

from ..base.capabilities import Capability
from ..base.interfaces import Transport
from .core import execjs

TEMPLATE = "drab.query.js"

INSERT_POSITIONS = ("append", "prepend", "before", "after")


def _target(selector: str) -> str:
    return f"$({json.dumps(selector)})"


def _call(selector: str, method: str, *args: Any) -> str:
    rendered = ", ".join(json.dumps(a) for a in args)
    return f"{_target(selector)}.{method}({rendered})"


def select(socket: Transport, selector: str, method: str = "html", argument: Any = None) -> Any:
    """Read from every element matching ``selector``.

    ``method`` is a jQuery getter (``html``, ``val``, ``attr`` ...);
    ``argument`` is passed through for getters that need one, like ``attr``.
    """
    args = () if argument is None else (argument,)
    return execjs(socket, _call(selector, method, *args))


def update(socket: Transport, selector: str, method: str, value: Any, argument: Any = None) -> Any:
    """Set ``value`` through a jQuery setter on every element matching ``selector``."""
    args = (value,) if argument is None else (argument, value)
    return execjs(socket, _call(selector, method, *args))


def insert(socket: Transport, selector: str, html: str, position: str = "append") -> Any:
    """Insert ``html`` relative to the matched elements.

    Raises:
        ValueError: If ``position`` is not one of ``INSERT_POSITIONS``.
    """
    if position not in INSERT_POSITIONS:
        raise ValueError(f"insert position must be one of {INSERT_POSITIONS}, got {position!r}")
    return execjs(socket, _call(selector, position, html))


def delete(socket: Transport, selector: str) -> Any:
    return execjs(socket, _call(selector, "remove"))


def execute(socket: Transport, selector: str, method: str, *args: Any) -> Any:
    """Call an arbitrary jQuery ``method`` with ``args`` on the matched elements."""
    return execjs(socket, _call(selector, method, *args))


CAPABILITY = Capability.from_functions(
    "query",
    select,
    update,
    insert,
    delete,
    execute,
    template=TEMPLATE,
    description="jQuery-based DOM queries and updates",
)

__all__ = ["CAPABILITY", "INSERT_POSITIONS", "select", "update", "insert", "delete", "execute"]
