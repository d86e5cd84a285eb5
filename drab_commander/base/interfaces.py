"""
Transport-facing interfaces (Protocols) for the composition layer.

Re-exports Protocols split into single-class modules under
``drab_commander.base.interfaces_parts`` to satisfy one-class-per-file
governance while keeping imports stable for upstream code.
"""

from __future__ import annotations

from .interfaces_parts import Transport

__all__ = ["Transport"]
