"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per request around the request's session, so every
service used by one handler shares one transaction.

Usage:
======
    from clubroster.api.dependencies.services import get_club_owner_service

    @router.post("/{club_id}/ownership/transfer")
    async def transfer(
        club_id: UUID,
        owner_service: ClubOwnerService = Depends(get_club_owner_service),
    ):
        ...
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from clubroster.api.dependencies.database import get_db
from clubroster.shared.services.club_service import ClubService
from clubroster.shared.services.club_membership_service import ClubMembershipService
from clubroster.shared.services.club_owner_service import ClubOwnerService
from clubroster.shared.services.club_moderation_service import ClubModerationService


async def get_club_service(
    db: AsyncSession = Depends(get_db),
) -> ClubService:
    """
    Dependency to get ClubService instance.
    """
    return ClubService(db)


async def get_membership_service(
    db: AsyncSession = Depends(get_db),
) -> ClubMembershipService:
    """
    Dependency to get ClubMembershipService instance.
    """
    return ClubMembershipService(db)


async def get_club_owner_service(
    db: AsyncSession = Depends(get_db),
) -> ClubOwnerService:
    """
    Dependency to get ClubOwnerService instance.
    """
    return ClubOwnerService(db)


async def get_moderation_service(
    db: AsyncSession = Depends(get_db),
) -> ClubModerationService:
    """
    Dependency to get ClubModerationService instance.
    """
    return ClubModerationService(db)
