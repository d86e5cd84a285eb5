"""Core composition building blocks: errors, logging, registry, pipeline.

Note: This package is intentionally free of the built-in capability
implementations; ``get_default_registry`` imports them lazily.
"""

from .capabilities import Capability, CapabilityRegistry, get_default_registry, set_default_registry
from .commander import Commander, commander
from .composition import activate, compose, ensure_accessor, merge
from .dto import Configuration, defaults
from .errors import CommanderError, ErrorCode, UnknownCapability, UnrecognizedOption
from .hooks import callback_for, config_of, enabled_templates, inherited_session, is_commander

__all__ = [
    "Capability",
    "CapabilityRegistry",
    "get_default_registry",
    "set_default_registry",
    "Commander",
    "commander",
    "activate",
    "compose",
    "ensure_accessor",
    "merge",
    "Configuration",
    "defaults",
    "CommanderError",
    "ErrorCode",
    "UnknownCapability",
    "UnrecognizedOption",
    "callback_for",
    "config_of",
    "enabled_templates",
    "inherited_session",
    "is_commander",
]
