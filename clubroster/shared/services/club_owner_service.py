"""
Club Owner Service

Orchestrates ownership transfer and moderator promotion/demotion. It never
touches the membership store directly; every write goes through
ClubMembershipService, inside the caller's unit of work.

Ownership Transfer:
===================
┌─────────────────────────────────────────────────────────────────────────────┐
│  1. Resolve club            → ClubNotFoundError                             │
│  2. Resolve new owner       → UserNotFoundError                             │
│  3. Resolve old owner (rows locked)                                         │
│       acting user holds OWNER?                                              │
│         yes → acting user                         (self-service)            │
│         no  → the club's single OWNER membership  (administrative override) │
│               none or several → IllegalStateError                           │
│  4. old owner == new owner  → InvalidArgumentError                          │
│  5. add OWNER to new owner  → MembershipNotFoundError if not a member       │
│  6. re-read old owner (locked); OWNER gone → ConcurrentModificationError    │
│  7. complete_transfer: remove OWNER (and MODERATOR if unmake_moderator)     │
│     from old owner in one call                                              │
└─────────────────────────────────────────────────────────────────────────────┘

Steps 1-4 only read, so any validation failure leaves the club untouched.
Steps 5-7 commit or roll back together with the surrounding transaction.

With complete_transfer=False the old owner keeps OWNER and the club ends up
co-owned. A later administrative override on such a club fails with
IllegalStateError until one owner gives the role up.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from clubroster.shared.core.exceptions import (
    ConcurrentModificationError,
    IllegalStateError,
    InvalidArgumentError,
)
from clubroster.shared.core.logging import get_logger
from clubroster.shared.models.club import Club
from clubroster.shared.models.club_membership import ClubMembership
from clubroster.shared.models.enums import ClubRole
from clubroster.shared.models.user import User
from clubroster.shared.services.club_membership_service import ClubMembershipService
from clubroster.shared.services.club_service import ClubService
from clubroster.shared.services.user_service import UserService


logger = get_logger(__name__)


class ClubOwnerService:
    """
    Owner-level club governance.

    Handles:
    - Ownership transfer (self-service or administrative override)
    - Promoting members to MODERATOR and demoting them back
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize ClubOwnerService.

        Args:
            session: Async database session
        """
        self.session = session
        self.membership_service = ClubMembershipService(session)
        self.club_service = ClubService(session)
        self.user_service = UserService(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # OWNERSHIP TRANSFER
    # ═══════════════════════════════════════════════════════════════════════════

    async def transfer_ownership(
        self,
        club_id: UUID,
        new_owner_id: UUID,
        complete_transfer: bool,
        unmake_moderator: bool,
        acting_user_id: UUID,
    ) -> ClubMembership:
        """
        Hand the club's OWNER role to another member.

        Args:
            club_id: Club whose ownership moves
            new_owner_id: Member receiving OWNER
            complete_transfer: Remove OWNER from the old owner; when False
                both users end up holding OWNER
            unmake_moderator: With complete_transfer, also strip MODERATOR
                from the old owner
            acting_user_id: User performing the transfer, already
                authorized by the caller as owner or administrator

        Returns:
            The new owner's membership

        Raises:
            ClubNotFoundError: Unknown club
            UserNotFoundError: Unknown new owner
            IllegalStateError: Acting user is not an owner and the club does
                not have exactly one owner
            InvalidArgumentError: Old and new owner are the same user
            MembershipNotFoundError: New owner is not a member of the club
            ConcurrentModificationError: A concurrent transfer took OWNER from
                the old owner first; nothing is changed
        """
        club = await self.club_service.require_club(club_id)
        new_owner = await self.user_service.require_user(new_owner_id)
        old_owner = await self._resolve_old_owner(club, acting_user_id)

        if old_owner.id == new_owner.id:
            raise InvalidArgumentError(
                "Cannot transfer ownership to the same user.",
                details={"club_id": str(club.id), "user_id": str(new_owner.id)},
            )

        new_membership = await self.membership_service.modify_role(
            {ClubRole.OWNER}, new_owner, club
        )
        await self._confirm_still_owner(club, old_owner)

        if complete_transfer:
            roles_to_remove = {ClubRole.OWNER}
            if unmake_moderator:
                roles_to_remove.add(ClubRole.MODERATOR)
            await self.membership_service.remove_role(roles_to_remove, old_owner, club)

        logger.info(
            "Ownership transferred",
            club_id=str(club.id),
            old_owner_id=str(old_owner.id),
            new_owner_id=str(new_owner.id),
            acting_user_id=str(acting_user_id),
            complete_transfer=complete_transfer,
            unmake_moderator=unmake_moderator,
        )
        return new_membership

    async def _resolve_old_owner(self, club: Club, acting_user_id: UUID) -> User:
        acting_membership = await self.membership_service.find_membership(
            club.id, acting_user_id, for_update=True
        )
        if acting_membership is not None and acting_membership.has_role(ClubRole.OWNER):
            return await self.user_service.require_user(acting_user_id)

        # Administrative override: the acting user does not own the club
        owners = await self.membership_service.list_by_club_and_role(
            club, ClubRole.OWNER, for_update=True
        )
        if len(owners) != 1:
            logger.error(
                "Club ownership invariant violated",
                club_id=str(club.id),
                owner_count=len(owners),
                owner_ids=[str(m.member_id) for m in owners],
                acting_user_id=str(acting_user_id),
            )
            raise IllegalStateError(
                f"Club {club.name} must have exactly one owner, found {len(owners)}",
                details={"club_id": str(club.id), "owner_count": len(owners)},
            )

        logger.info(
            "Administrative ownership override",
            club_id=str(club.id),
            acting_user_id=str(acting_user_id),
        )
        return await self.user_service.require_user(owners[0].member_id)

    async def _confirm_still_owner(self, club: Club, old_owner: User) -> None:
        # A transfer committed since resolution would otherwise leave two owners
        membership = await self.membership_service.find_membership(
            club.id, old_owner.id, for_update=True
        )
        if membership is None or not membership.has_role(ClubRole.OWNER):
            logger.warning(
                "Old owner lost OWNER during transfer",
                club_id=str(club.id),
                old_owner_id=str(old_owner.id),
            )
            raise ConcurrentModificationError(
                message="Club ownership changed during the transfer",
                details={"club_id": str(club.id), "old_owner_id": str(old_owner.id)},
            )

    # ═══════════════════════════════════════════════════════════════════════════
    # MODERATORS
    # ═══════════════════════════════════════════════════════════════════════════

    async def promote_to_moderator(self, club_id: UUID, user_id: UUID) -> ClubMembership:
        """
        Grant MODERATOR to a member.

        Raises:
            ClubNotFoundError, UserNotFoundError, MembershipNotFoundError
        """
        club = await self.club_service.require_club(club_id)
        user = await self.user_service.require_user(user_id)
        return await self.membership_service.modify_role({ClubRole.MODERATOR}, user, club)

    async def demote_moderator(self, club_id: UUID, user_id: UUID) -> ClubMembership:
        """
        Revoke MODERATOR from a member.

        Raises:
            ClubNotFoundError, UserNotFoundError, MembershipNotFoundError
        """
        club = await self.club_service.require_club(club_id)
        user = await self.user_service.require_user(user_id)
        return await self.membership_service.remove_role({ClubRole.MODERATOR}, user, club)
