"""Configuration merger: user options over the default configuration.

``merge`` is a pure function of (defaults, options, commander). Supplied keys
override defaults, absent keys keep them, ``commander`` is always the class
under composition, and the mandatory capability is forced into ``modules``
by the ``Configuration`` model itself.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import ValidationError

from ...config.defaults import RECOGNIZED_OPTIONS
from ..dto import Configuration
from ..errors import CommanderError, ErrorCode, UnrecognizedOption
from .naming import commander_name


def merge(defaults: Configuration, options: Optional[Mapping[str, Any]], commander: Any) -> Configuration:
    """Return a new configuration with ``options`` merged over ``defaults``.

    Parameters
    ----------
    defaults:
        Baseline configuration; never modified.
    options:
        Commander declaration options. Keys outside ``RECOGNIZED_OPTIONS``
        are rejected; a ``commander`` key is accepted and ignored.
    commander:
        The class being composed; always becomes ``Configuration.commander``.

    Raises
    ------
    UnrecognizedOption
        For the first unknown key in sorted order.
    CommanderError
        With ``ErrorCode.VALIDATION`` when a value has the wrong type.
    """
    options = dict(options or {})
    unknown = sorted((k for k in options if k not in RECOGNIZED_OPTIONS), key=str)
    if unknown:
        raise UnrecognizedOption(unknown[0], commander=commander_name(commander))

    data = {name: getattr(defaults, name) for name in Configuration.model_fields}
    data.update((k, v) for k, v in options.items() if k != "commander")
    data["commander"] = commander
    try:
        return Configuration.model_validate(data)
    except ValidationError as exc:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
        raise CommanderError(
            code=ErrorCode.VALIDATION,
            message=f"invalid value for option(s): {', '.join(fields)}",
            commander=commander_name(commander),
            raw=exc,
        ) from exc


__all__ = ["merge"]
