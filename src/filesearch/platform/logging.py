"""
FileSearch Structured Logging

Configures structured logging using structlog. The library itself only emits
events through ``get_logger()``; applications embedding the search engine call
``configure_logging()`` once at startup to choose level and output format.
"""

import logging
import sys
from typing import Optional

import structlog

from filesearch.platform.config import Settings, get_settings


def configure_logging(config: Optional[Settings] = None) -> None:
    """
    Configure structured logging for the application.

    Args:
        config: Settings providing ``LOG_LEVEL`` and ``APP_ENV``. Defaults to
            the cached environment settings.
    """
    config = config or get_settings()
    log_level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            # JSON in production, console in development
            structlog.processors.JSONRenderer()
            if config.APP_ENV == "production"
            else structlog.dev.ConsoleRenderer(colors=config.DEBUG),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=not config.DEBUG,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
