"""
Club Membership Service

Business rules over the membership store: enrollment, role mutation and
deregistration. This layer performs no authorization; callers (the HTTP
handlers, the ownership orchestrator, the moderation service) decide who may
invoke what.

Role Rules:
===========
- Every membership holds MEMBER, from enrollment until deregistration.
- Role changes are additive/subtractive set operations; repeating one is a
  no-op and issues no write.
- A user enrolled into a club they created receives OWNER as well.

Usage:
======
    from clubroster.shared.services.club_membership_service import ClubMembershipService

    service = ClubMembershipService(session)
    membership = await service.enroll(club, user)
    await service.modify_role({ClubRole.MODERATOR}, user, club)
"""

from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from clubroster.shared.core.exceptions import (
    MembershipNotFoundError,
    OwnerDeregistrationError,
)
from clubroster.shared.core.logging import get_logger
from clubroster.shared.models.club import Club
from clubroster.shared.models.club_membership import ClubMembership, MembershipKey
from clubroster.shared.models.enums import ClubRole
from clubroster.shared.models.user import User
from clubroster.shared.repositories.club_membership_repository import (
    ClubMembershipRepository,
)
from clubroster.shared.repositories.club_repository import ClubRepository
from clubroster.shared.repositories.user_repository import UserRepository


logger = get_logger(__name__)


def _role_names(roles: Iterable[ClubRole]) -> list[str]:
    return sorted(role.value for role in roles)


class ClubMembershipService:
    """
    Service for membership lifecycle and role management.

    Handles:
    - Idempotent enrollment (creator becomes OWNER)
    - Membership lookups and roster projections
    - Adding and removing roles (MEMBER is never removed)
    - Deregistration, guarded for owners
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize ClubMembershipService.

        Args:
            session: Async database session
        """
        self.session = session
        self.membership_repo = ClubMembershipRepository(session)
        self.club_repo = ClubRepository(session)
        self.user_repo = UserRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # ENROLLMENT
    # ═══════════════════════════════════════════════════════════════════════════

    async def enroll(self, club: Club, member: User) -> ClubMembership:
        """
        Make the user a member of the club.

        Flow:
        1. Existing membership → returned unchanged (no write)
        2. Otherwise create one with {MEMBER}, plus OWNER when the user is
           the club's creator

        Raises:
            ConcurrentModificationError: A concurrent request enrolled the
                same user first
        """
        existing = await self.membership_repo.find(club.id, member.id)
        if existing is not None:
            return existing

        roles = {ClubRole.MEMBER}
        if member.id == club.creator_id:
            roles.add(ClubRole.OWNER)

        membership = ClubMembership(club_id=club.id, member_id=member.id)
        membership.roles = roles
        await self.membership_repo.save(membership)

        logger.info(
            "Member enrolled",
            club_id=str(club.id),
            member_id=str(member.id),
            roles=_role_names(roles),
        )
        return membership

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUPS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_membership(
        self,
        club: Club,
        member: User,
        *,
        for_update: bool = False,
    ) -> ClubMembership:
        """
        Get the user's membership in the club.

        Raises:
            MembershipNotFoundError: The user is not a member
        """
        membership = await self.membership_repo.find(club.id, member.id, for_update=for_update)
        if membership is None:
            raise MembershipNotFoundError(
                member_id=member.id,
                club_id=club.id,
                member_name=member.username,
                club_name=club.name,
            )
        return membership

    async def find_membership(
        self,
        club_id: UUID,
        member_id: UUID,
        *,
        for_update: bool = False,
    ) -> Optional[ClubMembership]:
        """Like get_membership, but by raw ids and returning None when absent."""
        return await self.membership_repo.find(club_id, member_id, for_update=for_update)

    async def get_membership_by_key(self, key: MembershipKey) -> ClubMembership:
        """
        Get a membership by its composite key.

        Raises:
            MembershipNotFoundError: No membership under that key
        """
        membership = await self.membership_repo.find_by_key(key)
        if membership is None:
            raise MembershipNotFoundError(member_id=key.member_id, club_id=key.club_id)
        return membership

    async def list_by_club(self, club: Club) -> List[ClubMembership]:
        return await self.membership_repo.find_all_by_club(club.id)

    async def list_by_member(self, member: User) -> List[ClubMembership]:
        return await self.membership_repo.find_all_by_member(member.id)

    async def list_by_club_and_role(
        self,
        club: Club,
        role: ClubRole,
        *,
        for_update: bool = False,
    ) -> List[ClubMembership]:
        return await self.membership_repo.find_by_club_and_role(
            club.id, role, for_update=for_update
        )

    async def clubs_for(self, member: User) -> List[Club]:
        """Clubs the user belongs to."""
        return await self.club_repo.get_clubs_of_member(member.id)

    async def members_for(self, club: Club) -> List[User]:
        """Users belonging to the club."""
        return await self.user_repo.get_members_of_club(club.id)

    async def get_roles(self, club: Club, member: User) -> frozenset[ClubRole]:
        membership = await self.get_membership(club, member)
        return membership.roles

    async def get_highest_role(self, club: Club, member: User) -> ClubRole:
        """OWNER > MODERATOR > MEMBER."""
        membership = await self.get_membership(club, member)
        return membership.highest_role

    # ═══════════════════════════════════════════════════════════════════════════
    # ROLE MUTATION
    # ═══════════════════════════════════════════════════════════════════════════

    async def modify_role(
        self,
        roles_to_add: Iterable[ClubRole],
        member: User,
        club: Club,
    ) -> ClubMembership:
        """
        Add roles to the user's membership.

        Roles already held are ignored; when nothing changes no write is
        issued. The membership row is locked for the rest of the transaction.

        Raises:
            MembershipNotFoundError: The user is not a member
        """
        membership = await self.get_membership(club, member, for_update=True)

        current = membership.roles
        updated = current | set(roles_to_add)
        if updated == current:
            return membership

        membership.roles = updated
        await self.membership_repo.save(membership)

        logger.info(
            "Roles added",
            club_id=str(club.id),
            member_id=str(member.id),
            added=_role_names(updated - current),
            roles=_role_names(updated),
        )
        return membership

    async def remove_role(
        self,
        roles_to_remove: Iterable[ClubRole],
        member: User,
        club: Club,
    ) -> ClubMembership:
        """
        Remove roles from the user's membership.

        MEMBER is silently kept: a membership can only lose it by being
        deregistered.

        Raises:
            MembershipNotFoundError: The user is not a member
        """
        membership = await self.get_membership(club, member, for_update=True)

        current = membership.roles
        updated = current - (set(roles_to_remove) - {ClubRole.MEMBER})
        if updated == current:
            return membership

        membership.roles = updated
        await self.membership_repo.save(membership)

        logger.info(
            "Roles removed",
            club_id=str(club.id),
            member_id=str(member.id),
            removed=_role_names(current - updated),
            roles=_role_names(updated),
        )
        return membership

    # ═══════════════════════════════════════════════════════════════════════════
    # DEREGISTRATION
    # ═══════════════════════════════════════════════════════════════════════════

    async def deregister(self, member: User, club: Club, *, force: bool = False) -> None:
        """
        Remove the user's membership and every role it holds.

        Args:
            member: User leaving the club
            club: Club being left
            force: Allow removing the owner's membership (administrative
                cleanup); the club may be left without an owner

        Raises:
            MembershipNotFoundError: The user is not a member
            OwnerDeregistrationError: The membership holds OWNER and force
                is not set
        """
        membership = await self.get_membership(club, member, for_update=True)

        if ClubRole.OWNER in membership.roles and not force:
            raise OwnerDeregistrationError(member_id=member.id, club_id=club.id)

        await self.membership_repo.delete(membership)

        logger.info(
            "Member deregistered",
            club_id=str(club.id),
            member_id=str(member.id),
            forced=force,
        )
