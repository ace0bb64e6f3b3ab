"""Structured logging setup for maskedname."""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog

from ..core.config import NameConfig, get_config

PACKAGE_LOGGER = "maskedname"

# Applied to records from plain ``logging.getLogger`` calls and structlog events alike
_SHARED_PROCESSORS: list[Any] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def configure_logging(config: Optional[NameConfig] = None) -> logging.Logger:
    """Configure structlog and attach a stdout handler to the package logger.

    Records logged through the standard library by the core modules are
    rendered by the same structlog renderer as events from ``get_logger``.
    Replaces any handler installed by a previous call.
    """
    if config is None:
        config = get_config()

    if config.log_format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=_SHARED_PROCESSORS,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, config.log_level, logging.WARNING))

    get_logger(__name__).debug(
        "logging_configured", log_level=config.log_level, log_format=config.log_format
    )
    return package_logger


def get_logger(name: str) -> Any:
    """Get a structlog logger below the package logger."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return structlog.get_logger(name)
