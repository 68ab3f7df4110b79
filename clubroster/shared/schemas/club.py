"""
Club Schemas

Request/response models for club endpoints.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from clubroster.shared.schemas.common import BaseSchema


class ClubCreate(BaseModel):
    """Schema for club registration."""

    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=2000)


class ClubResponse(BaseSchema):
    """Schema for club response."""

    id: UUID
    name: str
    description: Optional[str] = None
    creator_id: UUID
    created_at: datetime


class ClubListResponse(BaseModel):
    """Clubs the current user belongs to."""

    data: list[ClubResponse]
    total: int
