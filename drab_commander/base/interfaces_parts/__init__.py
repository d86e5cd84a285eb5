"""Single-class Protocol modules re-exported by ``base.interfaces``."""

from .transport import Transport

__all__ = ["Transport"]
