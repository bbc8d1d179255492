"""Structured logging setup shared by the engine and the fixture generators."""

import logging

import structlog

from authflow.config import get_settings


def configure_logging() -> None:
    """Configure structlog once for the test process.

    Human-readable console output when DEBUG is set, JSON lines otherwise.
    """
    settings = get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
