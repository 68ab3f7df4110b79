"""
Logging Configuration

Structured logging setup using structlog for consistent, parseable logs.

Log Output:
===========
Development:
    2024-01-15 10:30:00 [info     ] Ownership transferred   club_id=550e8400-... new_owner_id=660e8400-...

Production (JSON):
    {"timestamp": "2024-01-15T10:30:00", "level": "info", "event": "Ownership transferred", "club_id": "..."}

Features:
=========
- Structured key-value logging
- Context variables (add info to all subsequent logs)
- Colored console output in development, JSON everywhere else

Usage:
======
    from clubroster.shared.core.logging import logger, get_logger, log_context

    # Basic logging
    logger.info("Member enrolled", club_id=club.id, member_id=member.id)
    logger.error("Owner invariant violated", club_id=club.id, owner_count=2)

    # Named logger per component
    service_logger = get_logger("membership")

    # Bind the acting user to every log line of the current request
    log_context(request_id=request_id, acting_user_id=user_id)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from clubroster.config.settings import settings


def setup_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """
    Configure structured logging for the application.

    Args:
        level: Log level name, defaults to settings.LOG_LEVEL
        json_output: Force JSON rendering; defaults to "not development"

    Called automatically when this module is imported.
    """
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper())
    render_json = (not settings.is_development) if json_output is None else json_output

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if render_json:
        processors: list[Processor] = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, e.g. "membership" or "ownership"

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Add context variables to all subsequent log calls.

    Context lives in contextvars, so it is scoped to the current request
    task and included in every log line until cleared.

    Example:
        log_context(request_id="abc-123", acting_user_id="user-456")
        logger.info("Transfer requested")  # Includes request_id, acting_user_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Clear all context variables bound with log_context()."""
    structlog.contextvars.clear_contextvars()


# Initialize logging on module import
setup_logging()

# Default logger instance for convenient import
logger = get_logger("clubroster")
