"""
User Repository

Database operations specific to the User model.
Extends BaseRepository with user-specific query methods.

Common Operations:
==================
- get_by_username()    → Find user by unique handle
- username_exists()    → Check if a handle is already taken
- get_members_of_club() → Users holding a membership in a club
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from clubroster.shared.repositories.base import BaseRepository
from clubroster.shared.models.club_membership import ClubMembership
from clubroster.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """
    Repository for User database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize UserRepository.

        Args:
            session: Async database session
        """
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username.

        SQL Generated:
            SELECT * FROM users WHERE username = 'alice'
        """
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def username_exists(self, username: str) -> bool:
        """Used to validate uniqueness when registering."""
        user = await self.get_by_username(username)
        return user is not None

    async def get_members_of_club(self, club_id: UUID) -> list[User]:
        """
        Users holding a membership in the club, oldest membership first.

        SQL Generated:
            SELECT users.* FROM users
            JOIN club_memberships ON club_memberships.member_id = users.id
            WHERE club_memberships.club_id = '...'
            ORDER BY club_memberships.joined_at
        """
        result = await self.session.execute(
            select(User)
            .join(ClubMembership, ClubMembership.member_id == User.id)
            .where(ClubMembership.club_id == club_id)
            .order_by(ClubMembership.joined_at, User.username)
        )
        return list(result.scalars().all())
