"""Structured logging configuration."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, WrappedLogger

# Fields the registry attaches to construction failures, rendered first.
CONSTRUCTION_FIELDS = ("kind", "entity_id")


def add_construction_context(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Put construction-failure fields right after the event and drop empty ids."""
    if not event_dict.get("entity_id"):
        event_dict.pop("entity_id", None)
    leading = {key: event_dict.pop(key) for key in ("event", *CONSTRUCTION_FIELDS) if key in event_dict}
    leading.update(event_dict)
    return leading


def _renderer(debug: bool) -> list[Any]:
    if debug:
        return [structlog.dev.ConsoleRenderer(colors=False, sort_keys=False)]
    return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]


def configure_logging(log_level: str = "INFO", debug: bool = False) -> None:
    """Configure structlog on top of the standard library logger.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        debug: Render plain console lines instead of JSON
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_construction_context,
        *_renderer(debug),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
