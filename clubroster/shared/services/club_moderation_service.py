"""
Club Moderation Service

Moderator-level roster management: adding members, removing ordinary
members, and granting non-owner roles. Callers authorize the acting user as
moderator, owner or administrator before invoking it.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from clubroster.shared.core.exceptions import (
    InsufficientPermissionsError,
    InvalidArgumentError,
)
from clubroster.shared.core.logging import get_logger
from clubroster.shared.models.club_membership import ClubMembership
from clubroster.shared.models.enums import ClubRole
from clubroster.shared.services.club_membership_service import ClubMembershipService
from clubroster.shared.services.club_service import ClubService
from clubroster.shared.services.user_service import UserService


logger = get_logger(__name__)

# Memberships holding any of these can only be changed at owner level
PROTECTED_ROLES = frozenset({ClubRole.MODERATOR, ClubRole.OWNER})


class ClubModerationService:
    """Service for moderator-level roster changes."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.membership_service = ClubMembershipService(session)
        self.club_service = ClubService(session)
        self.user_service = UserService(session)

    async def add_member(self, club_id: UUID, user_id: UUID) -> ClubMembership:
        """Enroll a user on their behalf. Idempotent."""
        club = await self.club_service.require_club(club_id)
        user = await self.user_service.require_user(user_id)
        return await self.membership_service.enroll(club, user)

    async def remove_member(self, club_id: UUID, user_id: UUID) -> None:
        """
        Deregister an ordinary member.

        Raises:
            ClubNotFoundError, UserNotFoundError, MembershipNotFoundError
            InsufficientPermissionsError: The target is a moderator or owner
        """
        club = await self.club_service.require_club(club_id)
        user = await self.user_service.require_user(user_id)
        membership = await self.membership_service.get_membership(club, user)

        if membership.roles & PROTECTED_ROLES:
            logger.warning(
                "Refused removal of privileged member",
                club_id=str(club.id),
                member_id=str(user.id),
            )
            raise InsufficientPermissionsError(
                "REMOVE_PRIVILEGED_MEMBER",
                details={"club_id": str(club.id), "member_id": str(user.id)},
            )

        await self.membership_service.deregister(user, club)

    async def change_role(self, club_id: UUID, user_id: UUID, role: ClubRole) -> ClubMembership:
        """
        Grant a role to a member.

        Raises:
            InvalidArgumentError: role is OWNER (ownership moves only by transfer)
        """
        if role == ClubRole.OWNER:
            raise InvalidArgumentError(
                "OWNER can only be granted through an ownership transfer",
                details={"club_id": str(club_id), "user_id": str(user_id)},
            )

        club = await self.club_service.require_club(club_id)
        user = await self.user_service.require_user(user_id)
        return await self.membership_service.modify_role({role}, user, club)
