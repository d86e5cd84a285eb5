"""Composition pipeline run once per commander class definition.

Stages are strictly linear: merge the options, import the capabilities,
install the accessor. The registry used is recorded next to the accessor so
later lookups resolve the same capabilities. A failure in any stage
propagates before the accessor exists, so a misconfigured commander never
becomes usable. Running the pipeline again on the same class repeats the
first two stages harmlessly and the accessor stage is absorbed by its
presence check. A subclass that passes its own options still imports its
capabilities but keeps the inherited accessor; that is logged as a warning.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ...config.defaults import ACCESSOR_NAME, CALLBACK_OPTIONS, REGISTRY_ATTR
from ..capabilities import CapabilityRegistry, get_default_registry
from ..dto import Configuration, defaults
from ..log_support import LogContext
from ..logging import get_logger, log_event
from .accessor import ensure_accessor
from .importer import activate
from .merger import merge
from .naming import commander_name

logger = get_logger("drab.composition")


def _warn_unbound_callbacks(host: type, configuration: Configuration, ctx: LogContext) -> None:
    for event in CALLBACK_OPTIONS:
        handler = getattr(configuration, event)
        if handler is not None and not callable(getattr(host, handler, None)):
            log_event(
                logger,
                "compose.callback_missing",
                ctx,
                level=logging.WARNING,
                callback=event,
                handler=handler,
            )


def compose(
    host: type,
    options: Optional[Mapping[str, Any]] = None,
    *,
    registry: Optional[CapabilityRegistry] = None,
) -> Configuration:
    """Compose ``host`` from ``options`` and return the merged configuration.

    Parameters
    ----------
    host:
        Commander class under definition.
    options:
        Declaration options (``modules``, ``onload``, ``onconnect``,
        ``ondisconnect``, ``inherit_session``).
    registry:
        Registry to resolve capabilities in; the default registry otherwise.

    Raises
    ------
    UnrecognizedOption, UnknownCapability, CommanderError
        Composition errors; the accessor is not installed.
    """
    ctx = LogContext(commander=commander_name(host))
    registry = registry or get_default_registry()

    configuration = merge(defaults(), options, host)
    log_event(
        logger,
        "compose.merged",
        ctx,
        level=logging.DEBUG,
        modules=list(configuration.modules),
        callbacks=dict(configuration.callbacks),
        inherit_session=sorted(configuration.inherit_session),
    )

    activate(host, configuration, registry)
    log_event(logger, "compose.imported", ctx, level=logging.DEBUG, modules=list(configuration.modules))

    _warn_unbound_callbacks(host, configuration, ctx)

    inherited = ACCESSOR_NAME not in vars(host) and hasattr(host, ACCESSOR_NAME)
    installed = ensure_accessor(host, configuration)
    if installed:
        setattr(host, REGISTRY_ATTR, registry)
    elif inherited and options:
        log_event(
            logger,
            "compose.accessor_inherited",
            ctx,
            level=logging.WARNING,
            options=sorted(str(k) for k in options),
        )
    log_event(logger, "compose.done", ctx, level=logging.DEBUG, accessor_installed=installed)
    return configuration


__all__ = ["compose"]
