"""drab_commander.config.defaults
==============================

Central place for the small, stable default values used by the composition
layer. Commanders override the option defaults through their declaration;
the remaining constants are fixed names shared between the composition
pipeline and its external collaborators.

Module Purpose
--------------
- Provide a single import location for conservative default constants (no I/O).
- Keep the composition code free of magic literals so the merge precedence
  and the accessor/ledger names are defined in exactly one place.

This module intentionally avoids importing from other drab_commander packages
to prevent circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- Capabilities ----
# Capability that is always active and always imported first.
MANDATORY_CAPABILITY = "core"
# Active set when a commander does not pass ``modules``.
DEFAULT_MODULES = ("core", "query", "modal")


# ---- Commander options ----
# Lifecycle callbacks a commander may bind to one of its handler names.
CALLBACK_OPTIONS = ("onload", "onconnect", "ondisconnect")
# Every key accepted in a commander declaration. ``commander`` is accepted
# but ignored: it is always the class under composition.
RECOGNIZED_OPTIONS = frozenset(
    ("modules", "inherit_session", "commander", *CALLBACK_OPTIONS)
)


# ---- Generated attributes ----
# Zero-argument accessor installed once per commander class.
ACCESSOR_NAME = "__drab__"
# Per-class ledger of operation name -> capability name installed by imports.
IMPORTS_ATTR = "__drab_imports__"
# Registry a commander class was composed against.
REGISTRY_ATTR = "__drab_registry__"


# ---- Logging ----
# Environment variable read for the shared ``drab`` logger level.
LOG_LEVEL_ENV = "DRAB_LOG_LEVEL"
# Root logger name shared by every module of the package.
BASE_LOGGER_NAME = "drab"


__all__ = [
    "MANDATORY_CAPABILITY",
    "DEFAULT_MODULES",
    "CALLBACK_OPTIONS",
    "RECOGNIZED_OPTIONS",
    "ACCESSOR_NAME",
    "IMPORTS_ATTR",
    "REGISTRY_ATTR",
    "LOG_LEVEL_ENV",
    "BASE_LOGGER_NAME",
]
