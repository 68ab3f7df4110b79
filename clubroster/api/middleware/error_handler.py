"""
Error Handler Middleware

Global exception handling for the API.

Converts the Clubroster exception hierarchy into JSON responses so handlers
never build error payloads themselves.

Error Response Format:
======================
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "User alice is not a member of Thursday Readers",
            "details": {"member_id": "...", "club_id": "..."}
        }
    }

Status Mapping:
===============
    MembershipNotFoundError / ClubNotFoundError / UserNotFoundError → 404
    InvalidArgumentError                                            → 400
    AuthenticationError                                             → 401
    AuthorizationError / InsufficientPermissionsError               → 403
    OwnerDeregistrationError / ConcurrentModificationError          → 409
    IllegalStateError                                               → 500
    anything else                                                   → 500 (details hidden)

Usage:
======
    from clubroster.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from clubroster.shared.core.exceptions import ClubrosterException
from clubroster.shared.core.logging import logger
from clubroster.shared.schemas.common import ErrorDetail, ErrorResponse


def _error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=code, message=message, details=details))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(ClubrosterException)
    async def clubroster_exception_handler(
        request: Request,
        exc: ClubrosterException,
    ) -> JSONResponse:
        """
        Handle application exceptions.

        Client errors are logged as warnings; invariant violations (5xx)
        as errors so they reach an operator.
        """
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "Request failed",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
        )
        return _error_response(exc.status_code, exc.error_code, exc.message, exc.details)

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """
        Handle Pydantic validation errors raised outside request parsing.
        """
        errors = exc.errors(include_url=False, include_context=False)
        logger.warning("Validation error", errors=errors)
        return _error_response(
            400, "VALIDATION_ERROR", "Request validation failed", {"errors": errors}
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            exc_info=True,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred")
