"""Structured logging setup.

Call ``setup_logging`` once at startup (``create_app`` does it); modules obtain
loggers with ``get_logger(__name__)`` and log key/value events.
"""
from __future__ import annotations

import logging

import structlog


def setup_logging(debug: bool = False, level: str = "INFO") -> None:
    """Configure structlog on top of the standard library logger."""

    log_level = logging.DEBUG if debug else getattr(logging, str(level).upper(), logging.INFO)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if debug:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=log_level, format="%(message)s")


def get_logger(name: str = __name__):
    return structlog.get_logger(name)
