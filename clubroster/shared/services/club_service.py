"""
Club Service

Resolves club ids to clubs, registers new clubs and deletes them.

A newly registered club is immediately joined by its creator, who thereby
becomes its first (and only) OWNER.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from clubroster.shared.core.exceptions import ClubNotFoundError, InvalidArgumentError
from clubroster.shared.core.logging import get_logger
from clubroster.shared.models.club import Club
from clubroster.shared.models.user import User
from clubroster.shared.repositories.club_repository import ClubRepository
from clubroster.shared.services.club_membership_service import ClubMembershipService


logger = get_logger(__name__)


class ClubService:
    """Service for club lookup and lifecycle."""

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize ClubService.

        Args:
            session: Async database session
        """
        self.session = session
        self.club_repo = ClubRepository(session)
        self.membership_service = ClubMembershipService(session)

    async def require_club(self, club_id: UUID) -> Club:
        """
        Get a club by id.

        Raises:
            ClubNotFoundError: No club with that id
        """
        club = await self.club_repo.get(club_id)
        if club is None:
            raise ClubNotFoundError(club_id)
        return club

    async def register_club(
        self,
        name: str,
        description: Optional[str],
        creator: User,
    ) -> Club:
        """
        Create a club and enroll its creator as OWNER.

        Raises:
            InvalidArgumentError: Blank name
        """
        if not name or not name.strip():
            raise InvalidArgumentError("Club name must not be blank")

        club = await self.club_repo.create(
            name=name.strip(),
            description=description,
            creator_id=creator.id,
        )
        await self.membership_service.enroll(club, creator)

        logger.info("Club registered", club_id=str(club.id), creator_id=str(creator.id))
        return club

    async def delete_club(self, club_id: UUID) -> None:
        """
        Delete a club together with all of its memberships.

        Raises:
            ClubNotFoundError: No club with that id
        """
        club = await self.require_club(club_id)
        await self.club_repo.delete(club)
        logger.info("Club deleted", club_id=str(club_id))
