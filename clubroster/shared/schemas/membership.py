"""
Membership Schemas

Request/response models for membership, role and ownership endpoints.

Example Transfer Request:
=========================
    POST /clubs/{club_id}/ownership/transfer
    {
        "new_owner_id": "660e8400-e29b-41d4-a716-446655440000",
        "complete_transfer": true,
        "unmake_moderator": false
    }
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_serializer

from clubroster.shared.models.enums import ClubRole
from clubroster.shared.schemas.common import BaseSchema
from clubroster.shared.schemas.user import UserResponse


class MembershipResponse(BaseSchema):
    """A membership with its role set."""

    club_id: UUID
    member_id: UUID
    roles: frozenset[ClubRole]
    joined_at: datetime
    version: int

    @field_serializer("roles")
    def serialize_roles(self, roles: frozenset[ClubRole]) -> list[str]:
        # Stable order for clients
        return sorted((role.value for role in roles), key=lambda r: ClubRole(r).rank)


class MemberListResponse(BaseModel):
    """Roster of a club."""

    data: list[UserResponse]
    total: int


class AddMemberRequest(BaseModel):
    """Moderator-initiated enrollment."""

    user_id: UUID


class RoleChangeRequest(BaseModel):
    """Grant a role to a member."""

    role: ClubRole


class RoleResponse(BaseModel):
    """The acting user's standing in a club."""

    club_id: UUID
    role: ClubRole = Field(description="Highest role held: OWNER > MODERATOR > MEMBER")


class OwnershipTransferRequest(BaseModel):
    """Schema for ownership transfer."""

    new_owner_id: UUID
    complete_transfer: bool = Field(
        default=True,
        description="Remove OWNER from the previous owner; false leaves both as co-owners",
    )
    unmake_moderator: bool = Field(
        default=False,
        description="With complete_transfer, also remove MODERATOR from the previous owner",
    )
