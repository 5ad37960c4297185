"""
Structured logging configuration using structlog.

Development environments get human-readable coloured output, everything else
gets JSON. Nothing is configured on import: applications call
`configure_logging()` themselves, or keep their own structlog setup.
"""

import logging
import sys

import structlog
from structlog.types import Processor

from backoff_sequence.core.config import settings


def configure_logging(force: bool = False) -> None:
    """
    Configure structured logging for the package.

    Args:
        force: Reconfigure even if structlog has already been configured.
    """
    if structlog.is_configured() and not force:
        return

    level = getattr(logging, settings.LOG_LEVEL, logging.WARNING)

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    logging.getLogger("backoff_sequence").setLevel(level)

    processors: list[Processor] = [
        # Drop events below the configured level before rendering
        structlog.stdlib.filter_by_level,
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
    ]

    if settings.is_development:
        processors.extend(
            [
                structlog.dev.set_exc_info,
                structlog.dev.ConsoleRenderer(colors=True),
            ]
        )
    else:
        processors.extend(
            [
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ]
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        structlog logger, bound lazily to whatever configuration is active
    """
    return structlog.get_logger(name)
