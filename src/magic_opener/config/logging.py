"""Logging configuration using structlog."""

import logging
import sys

import structlog
from structlog.typing import Processor


def configure_logging(log_level: str = "WARNING", json_logs: bool = False) -> None:
    """Configure structlog for the process.

    Logs go to stderr; stdout is reserved for the printed destination.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_logs:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
