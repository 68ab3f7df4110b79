"""
Club Repository

Database operations for clubs.

Common Operations:
==================
- get_clubs_of_member() → Clubs a user holds a membership in
"""

from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from clubroster.shared.repositories.base import BaseRepository
from clubroster.shared.models.club import Club
from clubroster.shared.models.club_membership import ClubMembership


class ClubRepository(BaseRepository[Club]):
    """
    Repository for Club database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize ClubRepository.

        Args:
            session: Async database session
        """
        super().__init__(Club, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_clubs_of_member(self, member_id: UUID) -> List[Club]:
        """
        Get all clubs the user is a member of.

        Args:
            member_id: User's UUID

        Returns:
            List of Club ordered by when the user joined
        """
        result = await self.session.execute(
            select(Club)
            .join(ClubMembership, ClubMembership.club_id == Club.id)
            .where(ClubMembership.member_id == member_id)
            .order_by(ClubMembership.joined_at, Club.name)
        )
        return list(result.scalars().all())

