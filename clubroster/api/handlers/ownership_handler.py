"""
Ownership handler.
Handles ownership transfer and moderator promotion/demotion.

All endpoints require the acting user to own the club or be an
administrator. An administrator who does not own the club performs an
administrative override: the club's current owner is resolved from the
roster.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from clubroster.api.dependencies.auth import ClubOwner
from clubroster.api.dependencies.services import get_club_owner_service
from clubroster.shared.schemas.membership import MembershipResponse, OwnershipTransferRequest
from clubroster.shared.services.club_owner_service import ClubOwnerService

router = APIRouter()


@router.post("/{club_id}/ownership/transfer", response_model=MembershipResponse)
async def transfer_ownership(
    club_id: UUID,
    data: OwnershipTransferRequest,
    current_user: ClubOwner,
    owner_service: ClubOwnerService = Depends(get_club_owner_service),
):
    """
    Transfer club ownership to another member.

    Returns the new owner's membership.
    """
    membership = await owner_service.transfer_ownership(
        club_id=club_id,
        new_owner_id=data.new_owner_id,
        complete_transfer=data.complete_transfer,
        unmake_moderator=data.unmake_moderator,
        acting_user_id=current_user.id,
    )
    return MembershipResponse.model_validate(membership)


@router.post("/{club_id}/moderators/{user_id}", response_model=MembershipResponse)
async def promote_moderator(
    club_id: UUID,
    user_id: UUID,
    current_user: ClubOwner,
    owner_service: ClubOwnerService = Depends(get_club_owner_service),
):
    """
    Make a member a moderator.
    """
    membership = await owner_service.promote_to_moderator(club_id, user_id)
    return MembershipResponse.model_validate(membership)


@router.delete("/{club_id}/moderators/{user_id}", response_model=MembershipResponse)
async def demote_moderator(
    club_id: UUID,
    user_id: UUID,
    current_user: ClubOwner,
    owner_service: ClubOwnerService = Depends(get_club_owner_service),
):
    """
    Revoke a member's moderator role.
    """
    membership = await owner_service.demote_moderator(club_id, user_id)
    return MembershipResponse.model_validate(membership)
