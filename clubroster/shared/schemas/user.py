"""
User Schemas

Response models for user identities as they appear in club rosters.
"""

from uuid import UUID

from clubroster.shared.models.enums import GlobalRole
from clubroster.shared.schemas.common import BaseSchema


class UserResponse(BaseSchema):
    """Schema for user response."""

    id: UUID
    username: str
    display_name: str
    global_role: GlobalRole
