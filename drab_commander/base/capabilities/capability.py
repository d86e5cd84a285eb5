"""Capability definition: a named bundle of operations.

A capability is activated on a commander by name; activation installs each
of its operations on the commander class. The optional ``template`` names the
browser-side script that accompanies the capability. Templates are served by
the transport layer, not by this package.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional


@dataclass(frozen=True)
class Capability:
    """Named, immutable bundle of operations.

    Attributes:
        name: Unique registry identifier (e.g. ``"query"``).
        operations: Read-only mapping of operation name to callable.
        template: Name of the browser script template enabled with it, if any.
        description: Human-readable summary.
    """

    name: str
    operations: Mapping[str, Callable[..., Any]] = field(default_factory=dict)
    template: Optional[str] = None
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("capability name must be non-empty")
        for op_name, op in self.operations.items():
            if not callable(op):
                raise TypeError(f"operation {op_name!r} of capability {self.name!r} is not callable")
        object.__setattr__(self, "operations", MappingProxyType(dict(self.operations)))

    @classmethod
    def from_functions(
        cls,
        name: str,
        *functions: Callable[..., Any],
        template: Optional[str] = None,
        description: str = "",
    ) -> "Capability":
        """Build a capability exporting ``functions`` under their ``__name__``."""
        return cls(
            name=name,
            operations={fn.__name__: fn for fn in functions},
            template=template,
            description=description,
        )

    def provides(self, operation: str) -> bool:
        """Return True if this capability exports ``operation``."""
        return operation in self.operations


__all__ = ["Capability"]
