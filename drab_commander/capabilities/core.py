"""Core capability: always active on every commander.

Runs JavaScript on the connected page, broadcasts it to every page served by
the same commander, and reads/writes the runtime store and the inherited
session. All operations take the connection ``socket`` first, like event
handlers receive it.
"""

from __future__ import annotations

from typing import Any

from ..base.capabilities import Capability
from ..base.interfaces import Transport

TEMPLATE = "drab.core.js"


def execjs(socket: Transport, js: str) -> Any:
    """Run ``js`` in the browser and return the value it evaluates to."""
    return socket.push("execjs", {"js": js})


def broadcastjs(socket: Transport, js: str) -> Any:
    """Run ``js`` in every browser connected to the same commander."""
    return socket.push("broadcastjs", {"js": js})


def get_store(socket: Transport, key: str, default: Any = None) -> Any:
    """Return the runtime store value for ``key``."""
    return socket.store.get(key, default)


def put_store(socket: Transport, key: str, value: Any) -> None:
    socket.store[key] = value


def get_session(socket: Transport, key: str, default: Any = None) -> Any:
    """Return an inherited session value; only whitelisted keys are present."""
    return socket.session.get(key, default)


CAPABILITY = Capability.from_functions(
    "core",
    execjs,
    broadcastjs,
    get_store,
    put_store,
    get_session,
    template=TEMPLATE,
    description="JavaScript execution, runtime store and session access",
)

__all__ = ["CAPABILITY", "execjs", "broadcastjs", "get_store", "put_store", "get_session"]
