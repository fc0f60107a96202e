"""
Structured logging configuration using structlog.

Provides consistent, structured logging across all modules.
Diagnostics (issues) are output, not logs; logs go to stderr only.
"""

import logging
import sys
from typing import Any

import structlog


def configure_logging(level: str = "WARNING", fmt: str = "console", stream: Any = sys.stderr) -> None:
    """
    Configure structlog for the application.

    Sets up:
    - Pretty console output (fmt="console")
    - JSON lines output (fmt="json")
    - Log level routed through standard library logging

    Args:
        level: Logging level name
        fmt: Output format, "console" or "json"
        stream: Stream the log records are written to
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if fmt == "json":
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=getattr(logging, level.upper(), logging.WARNING),
        force=True,
    )


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("directive_parse_failed", directive="nolint")
    """
    return structlog.get_logger(name)
