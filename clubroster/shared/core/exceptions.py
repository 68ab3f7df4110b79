"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Every exception carries the identifying parameters (ids and names) a caller
needs to render its own message; the API error handler turns them into JSON.

Exception Hierarchy:
====================
    ClubrosterException (base)
       │
       ├── AuthenticationError (401)          ← Missing or invalid token
       ├── AuthorizationError (403)           ← Caller lacks the club role
       │      └── InsufficientPermissionsError
       ├── NotFoundError (404)                ← Resource not found
       │      ├── UserNotFoundError
       │      ├── ClubNotFoundError
       │      └── MembershipNotFoundError     ← User is not a member of the club
       ├── ValidationError (400)              ← Invalid input data
       │      └── InvalidArgumentError        ← e.g. transfer to the same user
       ├── ConflictError (409)
       │      ├── OwnerDeregistrationError    ← Owner must hand off first
       │      └── ConcurrentModificationError ← Lost a race on a membership row
       └── IllegalStateError (500)            ← Stored data breaks an invariant

Usage:
======
    from clubroster.shared.core.exceptions import MembershipNotFoundError

    raise MembershipNotFoundError(
        member_id=user.id, club_id=club.id,
        member_name=user.username, club_name=club.name,
    )
    # {"error": {"code": "NOT_FOUND", "message": "User alice is not a member of Readers", ...}}
"""

from typing import Any, Optional
from uuid import UUID


class ClubrosterException(Exception):
    """
    Base exception for all Clubroster application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context (ids, names, counts)
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(ClubrosterException):
    """Authentication failed error (401 Unauthorized)."""

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class AuthorizationError(ClubrosterException):
    """
    Authorization failed error (403 Forbidden).

    Raised when user is authenticated but lacks the club role (or global
    administrator status) an operation requires.
    """

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR",
            details=details,
        )


class InsufficientPermissionsError(AuthorizationError):
    """The caller's club role does not allow acting on the target member."""

    def __init__(self, required_permission: str, details: Optional[dict[str, Any]] = None) -> None:
        extra_details = details or {}
        extra_details["required_permission"] = required_permission
        super().__init__(
            message=f"You lack permission {required_permission}",
            details=extra_details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(ClubrosterException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("Club", club_id)
        # Message: "Club with id 'abc-123' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        message: Optional[str] = None,
    ) -> None:
        if message is None:
            message = f"{resource} not found"
            if resource_id:
                message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: str | UUID) -> None:
        super().__init__(
            resource="User",
            resource_id=str(user_id),
            details={"user_id": str(user_id)},
        )


class ClubNotFoundError(NotFoundError):
    """Club not found error."""

    def __init__(self, club_id: str | UUID) -> None:
        super().__init__(
            resource="Club",
            resource_id=str(club_id),
            details={"club_id": str(club_id)},
        )


class MembershipNotFoundError(NotFoundError):
    """
    The user holds no membership in the club.

    Recoverable by the caller, e.g. by prompting the user to join first.
    Names are optional: lookups by raw composite key only know the ids.
    """

    def __init__(
        self,
        member_id: str | UUID,
        club_id: str | UUID,
        member_name: Optional[str] = None,
        club_name: Optional[str] = None,
    ) -> None:
        self.member_id = str(member_id)
        self.club_id = str(club_id)
        super().__init__(
            resource="Membership",
            message=f"User {member_name or member_id} is not a member of {club_name or club_id}",
            details={
                "member_id": self.member_id,
                "club_id": self.club_id,
                "member_name": member_name,
                "club_name": club_name,
            },
        )


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(ClubrosterException):
    """Validation error (400 Bad Request)."""

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
        error_code: str = "VALIDATION_ERROR",
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details,
        )


class InvalidArgumentError(ValidationError):
    """
    Request-shape violation by the caller.

    Example:
        raise InvalidArgumentError("Cannot transfer ownership to the same user.")
    """

    def __init__(
        self,
        message: str = "Invalid argument",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details, error_code="INVALID_ARGUMENT")


class ConflictError(ClubrosterException):
    """Resource conflict error (409 Conflict)."""

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
        error_code: str = "CONFLICT",
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code=error_code,
            details=details,
        )


class OwnerDeregistrationError(ConflictError):
    """The membership still holds OWNER; ownership must be transferred first."""

    def __init__(self, member_id: str | UUID, club_id: str | UUID) -> None:
        super().__init__(
            message="The club owner cannot leave the club before transferring ownership",
            details={"member_id": str(member_id), "club_id": str(club_id)},
            error_code="OWNER_DEREGISTRATION",
        )


class ConcurrentModificationError(ConflictError):
    """
    Another transaction changed the same membership first.

    The unit of work is rolled back; the caller may re-read and retry.
    """

    def __init__(
        self,
        message: str = "Membership was modified by a concurrent request",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details, error_code="CONCURRENT_MODIFICATION")


# ═══════════════════════════════════════════════════════════════════════════════
# INVARIANT VIOLATIONS (500)
# ═══════════════════════════════════════════════════════════════════════════════


class IllegalStateError(ClubrosterException):
    """
    Stored data violates a governance invariant.

    Signals data corruption, not a user error: it is logged for an operator
    and never repaired automatically.
    """

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="ILLEGAL_STATE",
            details=details,
        )
