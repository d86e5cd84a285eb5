"""Configuration constants for drab_commander."""

from .defaults import (
    ACCESSOR_NAME,
    BASE_LOGGER_NAME,
    CALLBACK_OPTIONS,
    DEFAULT_MODULES,
    IMPORTS_ATTR,
    LOG_LEVEL_ENV,
    MANDATORY_CAPABILITY,
    RECOGNIZED_OPTIONS,
    REGISTRY_ATTR,
)

__all__ = [
    "ACCESSOR_NAME",
    "BASE_LOGGER_NAME",
    "CALLBACK_OPTIONS",
    "DEFAULT_MODULES",
    "IMPORTS_ATTR",
    "LOG_LEVEL_ENV",
    "MANDATORY_CAPABILITY",
    "RECOGNIZED_OPTIONS",
    "REGISTRY_ATTR",
]
