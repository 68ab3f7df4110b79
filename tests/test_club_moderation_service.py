import pytest

from clubroster.shared.core.exceptions import (
    InsufficientPermissionsError,
    InvalidArgumentError,
    MembershipNotFoundError,
)
from clubroster.shared.models import ClubRole
from clubroster.shared.services import ClubMembershipService, ClubModerationService


@pytest.mark.asyncio
class TestModeration:

    async def test_add_member(self, session, roster):
        membership = await ClubModerationService(session).add_member(roster.club.id, roster.dave.id)

        assert membership.roles == {ClubRole.MEMBER}

    async def test_remove_plain_member(self, session, roster):
        service = ClubModerationService(session)

        await service.remove_member(roster.club.id, roster.carol.id)

        with pytest.raises(MembershipNotFoundError):
            await ClubMembershipService(session).get_membership(roster.club, roster.carol)

    async def test_moderator_cannot_be_removed(self, session, roster):
        service = ClubModerationService(session)
        await service.change_role(roster.club.id, roster.bob.id, ClubRole.MODERATOR)

        with pytest.raises(InsufficientPermissionsError):
            await service.remove_member(roster.club.id, roster.bob.id)

    async def test_owner_cannot_be_removed(self, session, roster):
        with pytest.raises(InsufficientPermissionsError):
            await ClubModerationService(session).remove_member(roster.club.id, roster.alice.id)

    async def test_owner_role_not_grantable(self, session, roster):
        with pytest.raises(InvalidArgumentError):
            await ClubModerationService(session).change_role(
                roster.club.id, roster.bob.id, ClubRole.OWNER
            )

        assert await ClubMembershipService(session).get_roles(roster.club, roster.bob) == {
            ClubRole.MEMBER
        }
