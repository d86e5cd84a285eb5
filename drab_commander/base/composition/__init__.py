"""Composition pipeline: merge, import capabilities, install the accessor."""

from .accessor import ensure_accessor
from .importer import activate
from .merger import merge
from .pipeline import compose

__all__ = ["merge", "activate", "ensure_accessor", "compose"]
