"""Structured logging configuration using structlog."""

import logging
import sys

import structlog
from structlog.types import Processor

from card_registration.config import settings


def configure_logging(
    log_level: str | None = None,
    format_as_json: bool | None = None,
) -> None:
    """
    Configure structured logging for the kit.

    Card numbers, CVVs and expiry dates are never passed to loggers; events
    carry the registration id, endpoint, result codes and HTTP status only.

    Args:
        log_level: Logging level (defaults to settings.log_level)
        format_as_json: Render JSON instead of console output
            (defaults to settings.log_format_json)
    """
    level_name = (log_level or settings.log_level).upper()
    if format_as_json is None:
        format_as_json = settings.log_format_json

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level_name),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if format_as_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(environment=settings.environment)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
