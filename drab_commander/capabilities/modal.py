"""Modal capability: blocking browser-side alert dialogs."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..base.capabilities import Capability
from ..base.interfaces import Transport

TEMPLATE = "drab.modal.js"

DEFAULT_BUTTONS = {"ok": "OK"}


def alert(socket: Transport, title: str, body: str, buttons: Optional[Mapping[str, str]] = None) -> Any:
    """Show a modal dialog and return the browser's reply (the button clicked).

    ``buttons`` maps a button key to its label; defaults to a single ``OK``.
    """
    payload = {
        "title": title,
        "body": body,
        "buttons": dict(buttons) if buttons else dict(DEFAULT_BUTTONS),
    }
    return socket.push("modal", payload)


CAPABILITY = Capability.from_functions(
    "modal",
    alert,
    template=TEMPLATE,
    description="Bootstrap-style modal dialogs",
)

__all__ = ["CAPABILITY", "DEFAULT_BUTTONS", "alert"]
