"""Structured logging configuration.

This module initializes structlog with a stable JSON line format.
Events are routed through stdlib logging so hosts control handlers;
command-line runs attach a stderr handler with ``configure_cli_logging``.
"""

from __future__ import annotations

import logging
from typing import IO, Any

import structlog


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)


def configure_cli_logging(level: str = "INFO", stream: IO[str] | None = None) -> None:
    """Emit structured events as JSON lines for command-line runs.

    Stdout stays reserved for command output; events go to ``stream``,
    stderr by default. Existing root handlers are kept as they are.

    Args:
        level: Minimum stdlib level name, e.g. ``INFO``.
        stream: Optional destination stream.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if root_logger.handlers:
        return
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
