"""structlog setup for applications embedding manifestcheck.

The library only obtains loggers; call configure_logging() from the
application entry point to choose renderers and the level filter.
"""

import logging
from typing import Optional

import structlog

from manifestcheck.config import Settings, get_settings


def _level_number(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structured logging from settings.

    Console output when DEBUG is set, JSON lines otherwise.
    """
    settings = settings or get_settings()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(settings.LOG_LEVEL)),
    )
