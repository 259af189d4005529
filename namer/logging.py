"""Structured logging for the naming service."""

import logging
import sys

import structlog
from structlog.stdlib import BoundLogger

from .config import LOG_JSON, LOG_LEVEL


def setup_logging(level: str = "INFO", json_format: bool = True) -> None:
    """Send structlog events through stdlib logging on stderr, as JSON unless json_format is off."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    renderer = structlog.processors.JSONRenderer() if json_format else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> BoundLogger:
    return structlog.get_logger(name)


setup_logging(level=LOG_LEVEL, json_format=LOG_JSON)
