"""
Club Membership Repository

Keyed store of membership records. Holds no business rules: role semantics,
owner uniqueness and authorization live in the service layer.

Common Operations:
==================
- find()                  → Membership for (club, member), optionally locked
- find_by_key()           → Same, from a MembershipKey
- find_by_club_and_role() → Memberships in a club holding a role
- find_all_by_club()      → Every membership of a club
- find_all_by_member()    → Every membership of a user
- save()                  → Insert or update, then flush
- delete()                → Remove a membership and its role rows

Locking:
========
    find(..., for_update=True)
        │
        ▼
    SELECT ... FROM club_memberships WHERE ... FOR UPDATE
        │   (populate_existing: identity-mapped rows are overwritten
        │    with what the lock actually protects)
        ▼
    concurrent writers on the same rows wait until commit/rollback

SQLite ignores FOR UPDATE; there the `version` column still turns a lost
update into ConcurrentModificationError on flush.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from clubroster.shared.core.exceptions import ConcurrentModificationError
from clubroster.shared.core.logging import get_logger
from clubroster.shared.models.club_membership import (
    ClubMembership,
    ClubMembershipRole,
    MembershipKey,
)
from clubroster.shared.models.enums import ClubRole
from clubroster.shared.repositories.base import BaseRepository


logger = get_logger(__name__)


class ClubMembershipRepository(BaseRepository[ClubMembership]):
    """
    Repository for ClubMembership database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize ClubMembershipRepository.

        Args:
            session: Async database session
        """
        super().__init__(ClubMembership, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def find(
        self,
        club_id: UUID,
        member_id: UUID,
        *,
        for_update: bool = False,
    ) -> Optional[ClubMembership]:
        """
        Get the membership of a user in a club.

        Args:
            club_id: Club's UUID
            member_id: User's UUID
            for_update: Lock the row until the transaction ends

        Returns:
            ClubMembership if found, None otherwise

        SQL Generated:
            SELECT * FROM club_memberships
            WHERE club_id = '...' AND member_id = '...'
            [FOR UPDATE]
        """
        query = select(ClubMembership).where(
            ClubMembership.club_id == club_id,
            ClubMembership.member_id == member_id,
        )
        if for_update:
            query = query.with_for_update().execution_options(populate_existing=True)

        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def find_by_key(
        self,
        key: MembershipKey,
        *,
        for_update: bool = False,
    ) -> Optional[ClubMembership]:
        return await self.find(key.club_id, key.member_id, for_update=for_update)

    async def find_by_club_and_role(
        self,
        club_id: UUID,
        role: ClubRole,
        *,
        for_update: bool = False,
    ) -> List[ClubMembership]:
        """
        Get memberships in a club holding the given role.

        SQL Generated:
            SELECT club_memberships.* FROM club_memberships
            JOIN club_membership_roles USING (club_id, member_id)
            WHERE club_memberships.club_id = '...' AND club_membership_roles.role = 'OWNER'
        """
        query = (
            select(ClubMembership)
            .join(
                ClubMembershipRole,
                (ClubMembershipRole.club_id == ClubMembership.club_id)
                & (ClubMembershipRole.member_id == ClubMembership.member_id),
            )
            .where(
                ClubMembership.club_id == club_id,
                ClubMembershipRole.role == role,
            )
            .order_by(ClubMembership.joined_at)
        )
        if for_update:
            query = query.with_for_update(of=ClubMembership).execution_options(
                populate_existing=True
            )

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_all_by_club(self, club_id: UUID) -> List[ClubMembership]:
        result = await self.session.execute(
            select(ClubMembership)
            .where(ClubMembership.club_id == club_id)
            .order_by(ClubMembership.joined_at)
        )
        return list(result.scalars().all())

    async def find_all_by_member(self, member_id: UUID) -> List[ClubMembership]:
        result = await self.session.execute(
            select(ClubMembership)
            .where(ClubMembership.member_id == member_id)
            .order_by(ClubMembership.joined_at)
        )
        return list(result.scalars().all())

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def save(self, membership: ClubMembership) -> ClubMembership:
        """
        Persist a new or modified membership.

        New records are INSERTed; loaded records have their changes (role rows
        and the versioned parent row) flushed.

        Raises:
            ConcurrentModificationError: The row changed since it was read, or
                a concurrent enrollment created the same key first
        """
        if membership not in self.session:
            self.session.add(membership)

        await self._flush(membership)
        return membership

    async def delete(self, membership: ClubMembership) -> None:
        """
        Remove a membership together with all its role rows.

        Raises:
            ConcurrentModificationError: The row changed since it was read
        """
        await self.session.delete(membership)
        await self._flush(membership)

    async def _flush(self, membership: ClubMembership) -> None:
        club_id, member_id = membership.club_id, membership.member_id
        try:
            await self.session.flush()
        except StaleDataError as e:
            logger.warning(
                "Membership changed concurrently",
                club_id=str(club_id),
                member_id=str(member_id),
            )
            raise ConcurrentModificationError(
                message="Membership was modified by another transaction",
                details={"club_id": str(club_id), "member_id": str(member_id)},
            ) from e
        except IntegrityError as e:
            logger.warning(
                "Membership key conflict",
                club_id=str(club_id),
                member_id=str(member_id),
                error=str(e.orig),
            )
            raise ConcurrentModificationError(
                message="Membership was created or removed by another transaction",
                details={"club_id": str(club_id), "member_id": str(member_id)},
            ) from e
