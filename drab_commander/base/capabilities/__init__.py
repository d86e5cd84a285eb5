"""Capability definitions and the registry that resolves them by name."""

from .capability import Capability
from .registry import CapabilityRegistry, get_default_registry, set_default_registry

__all__ = ["Capability", "CapabilityRegistry", "get_default_registry", "set_default_registry"]
