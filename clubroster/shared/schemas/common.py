"""
Common Schemas

Building blocks shared by every API payload: the ORM-aware base model, the
error envelope produced by the error-handler middleware, and small status
responses.

Usage:
======
    from clubroster.shared.schemas.common import BaseSchema

    class ClubResponse(BaseSchema):
        id: UUID
        name: str

    ClubResponse.model_validate(club)  # straight from the ORM object
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """Response base: builds from ORM attributes, accepts field names or aliases."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str
    success: bool = True


# ═══════════════════════════════════════════════════════════════════════════════
# ERROR ENVELOPE
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorDetail(BaseModel):
    code: str = Field(description="Stable machine-readable code, e.g. NOT_FOUND")
    message: str
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Ids, names and counts identifying what failed",
    )


class ErrorResponse(BaseModel):
    """
    Body of every non-2xx response.

        {"error": {"code": "OWNER_DEREGISTRATION",
                   "message": "...",
                   "details": {"member_id": "...", "club_id": "..."}}}
    """

    error: ErrorDetail


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str
    version: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
