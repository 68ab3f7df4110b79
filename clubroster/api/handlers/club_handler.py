"""
Club handler.
Handles club registration, lookup and deletion, and the acting user's own
membership (join, leave, role).

ARCHITECTURE NOTE:
  Handler → Service → Repository → Model

Handlers should ONLY:
- Parse HTTP requests
- Authorize the acting user (via dependencies)
- Call service methods
- Format HTTP responses
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from clubroster.api.dependencies.auth import ClubOwner, CurrentUser
from clubroster.api.dependencies.services import get_club_service, get_membership_service
from clubroster.shared.schemas.club import ClubCreate, ClubListResponse, ClubResponse
from clubroster.shared.schemas.common import MessageResponse
from clubroster.shared.schemas.membership import MembershipResponse, RoleResponse
from clubroster.shared.services.club_membership_service import ClubMembershipService
from clubroster.shared.services.club_service import ClubService

router = APIRouter()


@router.post("", response_model=ClubResponse, status_code=status.HTTP_201_CREATED)
async def create_club(
    data: ClubCreate,
    current_user: CurrentUser,
    club_service: ClubService = Depends(get_club_service),
):
    """
    Register a club. The creator joins it as OWNER.
    """
    club = await club_service.register_club(data.name, data.description, current_user)
    return ClubResponse.model_validate(club)


@router.get("", response_model=ClubListResponse)
async def list_my_clubs(
    current_user: CurrentUser,
    membership_service: ClubMembershipService = Depends(get_membership_service),
):
    """
    List the clubs the authenticated user belongs to.
    """
    clubs = await membership_service.clubs_for(current_user)
    return ClubListResponse(
        data=[ClubResponse.model_validate(c) for c in clubs],
        total=len(clubs),
    )


@router.get("/{club_id}", response_model=ClubResponse)
async def get_club(
    club_id: UUID,
    current_user: CurrentUser,
    club_service: ClubService = Depends(get_club_service),
):
    """
    Get a club by id.
    """
    club = await club_service.require_club(club_id)
    return ClubResponse.model_validate(club)


@router.delete("/{club_id}", response_model=MessageResponse)
async def delete_club(
    club_id: UUID,
    current_user: ClubOwner,
    club_service: ClubService = Depends(get_club_service),
):
    """
    Delete a club and all its memberships. Owner or administrator only.
    """
    await club_service.delete_club(club_id)
    return MessageResponse(message="Club deleted")


# ═══════════════════════════════════════════════════════════════════════════════
# OWN MEMBERSHIP
# ═══════════════════════════════════════════════════════════════════════════════


@router.post("/{club_id}/join", response_model=MembershipResponse)
async def join_club(
    club_id: UUID,
    current_user: CurrentUser,
    club_service: ClubService = Depends(get_club_service),
    membership_service: ClubMembershipService = Depends(get_membership_service),
):
    """
    Join a club. Joining again returns the existing membership.
    """
    club = await club_service.require_club(club_id)
    membership = await membership_service.enroll(club, current_user)
    return MembershipResponse.model_validate(membership)


@router.post("/{club_id}/leave", response_model=MessageResponse)
async def leave_club(
    club_id: UUID,
    current_user: CurrentUser,
    club_service: ClubService = Depends(get_club_service),
    membership_service: ClubMembershipService = Depends(get_membership_service),
):
    """
    Leave a club.

    The owner must transfer ownership first (409 otherwise).
    """
    club = await club_service.require_club(club_id)
    await membership_service.deregister(current_user, club)
    return MessageResponse(message=f"Left club {club.name}")


@router.get("/{club_id}/role", response_model=RoleResponse)
async def get_my_role(
    club_id: UUID,
    current_user: CurrentUser,
    club_service: ClubService = Depends(get_club_service),
    membership_service: ClubMembershipService = Depends(get_membership_service),
):
    """
    Highest role the authenticated user holds in the club.
    """
    club = await club_service.require_club(club_id)
    role = await membership_service.get_highest_role(club, current_user)
    return RoleResponse(club_id=club.id, role=role)
