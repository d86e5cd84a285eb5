"""drab_commander package

Declarative capability composition for live-page commanders.

Purpose:
    A commander class declares, at definition time, which capability modules
    it enables and which lifecycle callbacks and inheritable session keys
    apply to it. The options are merged over a fixed default configuration,
    the enabled capabilities' operations become callable on the class, and a
    single accessor (``__drab__``) returns the merged configuration.

Public API (re-exported):
    - Version: ``__version__``
    - Declaration: :class:`Commander`, :func:`commander`
    - Pipeline: :func:`compose`, :func:`merge`, :func:`activate`,
      :func:`ensure_accessor`
    - Records & registry: :class:`Configuration`, :func:`defaults`,
      :class:`Capability`, :class:`CapabilityRegistry`,
      :func:`get_default_registry`, :func:`set_default_registry`
    - Lookups: :func:`config_of`, :func:`callback_for`,
      :func:`inherited_session`, :func:`enabled_templates`,
      :func:`is_commander`
    - Exceptions: :class:`CommanderError`, :class:`ErrorCode`,
      :class:`UnrecognizedOption`, :class:`UnknownCapability`
"""

from .base import (
    Capability,
    CapabilityRegistry,
    Commander,
    CommanderError,
    Configuration,
    ErrorCode,
    UnknownCapability,
    UnrecognizedOption,
    activate,
    callback_for,
    commander,
    compose,
    config_of,
    defaults,
    enabled_templates,
    ensure_accessor,
    get_default_registry,
    inherited_session,
    is_commander,
    merge,
    set_default_registry,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Commander",
    "commander",
    "compose",
    "merge",
    "activate",
    "ensure_accessor",
    "Configuration",
    "defaults",
    "Capability",
    "CapabilityRegistry",
    "get_default_registry",
    "set_default_registry",
    "config_of",
    "callback_for",
    "inherited_session",
    "enabled_templates",
    "is_commander",
    "CommanderError",
    "ErrorCode",
    "UnrecognizedOption",
    "UnknownCapability",
]
