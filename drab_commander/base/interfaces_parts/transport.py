"""Transport Protocol (single-class module).

Boundary to the live-page channel that built-in capabilities talk through.
The channel itself lives outside this package.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, MutableMapping, Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Interface for the per-connection socket handed to event handlers.

    Attributes:
        store: Runtime key-value store for the connected page.
        session: Read-only view of the inherited session values.
    """

    store: MutableMapping[str, Any]
    session: Mapping[str, Any]

    def push(self, event: str, payload: Dict[str, Any]) -> Any:
        """Send ``payload`` to the browser under ``event`` and return its reply."""
        ...
