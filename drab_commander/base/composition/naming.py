"""Naming helper shared by composition steps for errors and log context."""

from __future__ import annotations

from typing import Any, Optional


def commander_name(host: Any) -> Optional[str]:
    """Return ``module.QualName`` for a class, ``None`` when ``host`` is None."""
    if host is None:
        return None
    module = getattr(host, "__module__", None)
    qualname = getattr(host, "__qualname__", None) or repr(host)
    return f"{module}.{qualname}" if module else qualname


__all__ = ["commander_name"]
