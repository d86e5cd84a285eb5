"""DTO package for composition records."""

from .configuration import Configuration, defaults, with_mandatory

__all__ = ["Configuration", "defaults", "with_mandatory"]
