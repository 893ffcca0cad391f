"""Structured logging for the agenda package.

Module loggers are stdlib loggers under the ``agenda`` namespace wrapped by
structlog, so ``AGENDA_LOG_LEVEL`` filters them through the standard level
machinery without touching the global structlog configuration of an
embedding application.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog

from agenda.config import Settings, get_settings

PACKAGE_LOGGER = "agenda"

_handler: Optional[logging.Handler] = None
_renderer: Any = structlog.dev.ConsoleRenderer(colors=False)


def _render(logger: Any, method_name: str, event_dict: dict) -> str:
    return _renderer(logger, method_name, event_dict)


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Apply the configured level and renderer to the package loggers.

    Safe to call repeatedly; the stdout handler is attached only once.
    """
    global _handler, _renderer
    settings = settings or get_settings()
    level = getattr(logging, settings.agenda_log_level.upper(), logging.INFO)

    _renderer = (
        structlog.processors.JSONRenderer()
        if settings.is_production
        else structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(_handler)
        package_logger.propagate = False


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a named structured logger, configuring the package on first use."""
    if _handler is None:
        setup_logging()
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _render,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
