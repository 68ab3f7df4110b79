"""
Membership handler.
Handles club rosters and moderator-level roster changes.

Authorization:
  GET     /{club_id}/members                     member or administrator
  POST    /{club_id}/members                     moderator, owner or administrator
  DELETE  /{club_id}/members/{user_id}           moderator, owner or administrator
  PUT     /{club_id}/members/{user_id}/role      moderator, owner or administrator
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from clubroster.api.dependencies.auth import ClubMember, ClubModerator
from clubroster.api.dependencies.services import (
    get_club_service,
    get_membership_service,
    get_moderation_service,
)
from clubroster.shared.schemas.common import MessageResponse
from clubroster.shared.schemas.membership import (
    AddMemberRequest,
    MemberListResponse,
    MembershipResponse,
    RoleChangeRequest,
)
from clubroster.shared.schemas.user import UserResponse
from clubroster.shared.services.club_membership_service import ClubMembershipService
from clubroster.shared.services.club_moderation_service import ClubModerationService
from clubroster.shared.services.club_service import ClubService

router = APIRouter()


@router.get("/{club_id}/members", response_model=MemberListResponse)
async def list_members(
    club_id: UUID,
    current_user: ClubMember,
    club_service: ClubService = Depends(get_club_service),
    membership_service: ClubMembershipService = Depends(get_membership_service),
):
    """
    List the members of a club.
    """
    club = await club_service.require_club(club_id)
    members = await membership_service.members_for(club)
    return MemberListResponse(
        data=[UserResponse.model_validate(m) for m in members],
        total=len(members),
    )


@router.post(
    "/{club_id}/members",
    response_model=MembershipResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_member(
    club_id: UUID,
    data: AddMemberRequest,
    current_user: ClubModerator,
    moderation_service: ClubModerationService = Depends(get_moderation_service),
):
    """
    Enroll another user into the club.
    """
    membership = await moderation_service.add_member(club_id, data.user_id)
    return MembershipResponse.model_validate(membership)


@router.delete("/{club_id}/members/{user_id}", response_model=MessageResponse)
async def remove_member(
    club_id: UUID,
    user_id: UUID,
    current_user: ClubModerator,
    moderation_service: ClubModerationService = Depends(get_moderation_service),
):
    """
    Remove an ordinary member. Moderators and owners cannot be removed here.
    """
    await moderation_service.remove_member(club_id, user_id)
    return MessageResponse(message="Member removed")


@router.put("/{club_id}/members/{user_id}/role", response_model=MembershipResponse)
async def change_member_role(
    club_id: UUID,
    user_id: UUID,
    data: RoleChangeRequest,
    current_user: ClubModerator,
    moderation_service: ClubModerationService = Depends(get_moderation_service),
):
    """
    Grant a role to a member. OWNER is only granted by ownership transfer.
    """
    membership = await moderation_service.change_role(club_id, user_id, data.role)
    return MembershipResponse.model_validate(membership)
