"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from clubroster.shared.core.logging import logger, get_logger
    from clubroster.shared.core.exceptions import ClubrosterException, MembershipNotFoundError

    logger.info("Member enrolled", club_id=club_id, member_id=member_id)
"""

from clubroster.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from clubroster.shared.core.exceptions import (
    ClubrosterException,
    AuthenticationError,
    AuthorizationError,
    InsufficientPermissionsError,
    NotFoundError,
    UserNotFoundError,
    ClubNotFoundError,
    MembershipNotFoundError,
    ValidationError,
    InvalidArgumentError,
    ConflictError,
    OwnerDeregistrationError,
    ConcurrentModificationError,
    IllegalStateError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "ClubrosterException",
    "AuthenticationError",
    "AuthorizationError",
    "InsufficientPermissionsError",
    "NotFoundError",
    "UserNotFoundError",
    "ClubNotFoundError",
    "MembershipNotFoundError",
    "ValidationError",
    "InvalidArgumentError",
    "ConflictError",
    "OwnerDeregistrationError",
    "ConcurrentModificationError",
    "IllegalStateError",
]
