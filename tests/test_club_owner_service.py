import uuid

import pytest

from clubroster.shared.core.exceptions import (
    ClubNotFoundError,
    ConcurrentModificationError,
    IllegalStateError,
    InvalidArgumentError,
    MembershipNotFoundError,
    UserNotFoundError,
)
from clubroster.shared.db.session import unit_of_work
from clubroster.shared.models import ClubRole
from clubroster.shared.services import ClubMembershipService, ClubOwnerService, ClubService


async def roles_of(session_factory, club, user):
    async with session_factory() as session:
        membership = await ClubMembershipService(session).find_membership(club.id, user.id)
        return membership.roles if membership else None


@pytest.mark.asyncio
class TestSelfServiceTransfer:

    async def test_complete_transfer(self, session_factory, roster):
        """
        Scenario: the owner hands the club to a member.
        Expected: exactly one owner afterwards, the old owner stays a member.
        """
        async with unit_of_work(session_factory) as session:
            membership = await ClubOwnerService(session).transfer_ownership(
                roster.club.id, roster.bob.id, True, False, roster.alice.id
            )

        assert membership.roles == {ClubRole.MEMBER, ClubRole.OWNER}
        assert await roles_of(session_factory, roster.club, roster.alice) == {ClubRole.MEMBER}
        async with session_factory() as session:
            owners = await ClubMembershipService(session).list_by_club_and_role(
                roster.club, ClubRole.OWNER
            )
        assert [m.member_id for m in owners] == [roster.bob.id]

    async def test_co_owner_transfer(self, session_factory, roster):
        async with unit_of_work(session_factory) as session:
            await ClubOwnerService(session).transfer_ownership(
                roster.club.id, roster.bob.id, False, False, roster.alice.id
            )

        assert ClubRole.OWNER in await roles_of(session_factory, roster.club, roster.alice)
        assert ClubRole.OWNER in await roles_of(session_factory, roster.club, roster.bob)

    async def test_unmake_moderator(self, session_factory, roster):
        async with unit_of_work(session_factory) as session:
            service = ClubOwnerService(session)
            await service.promote_to_moderator(roster.club.id, roster.alice.id)
            await service.transfer_ownership(
                roster.club.id, roster.carol.id, True, True, roster.alice.id
            )

        assert await roles_of(session_factory, roster.club, roster.alice) == {ClubRole.MEMBER}

    async def test_moderator_kept_without_unmake(self, session_factory, roster):
        async with unit_of_work(session_factory) as session:
            service = ClubOwnerService(session)
            await service.promote_to_moderator(roster.club.id, roster.alice.id)
            await service.transfer_ownership(
                roster.club.id, roster.carol.id, True, False, roster.alice.id
            )

        assert await roles_of(session_factory, roster.club, roster.alice) == {
            ClubRole.MEMBER,
            ClubRole.MODERATOR,
        }

    async def test_transfer_to_self_rejected(self, session_factory, roster):
        with pytest.raises(InvalidArgumentError):
            async with unit_of_work(session_factory) as session:
                await ClubOwnerService(session).transfer_ownership(
                    roster.club.id, roster.alice.id, True, False, roster.alice.id
                )

        assert await roles_of(session_factory, roster.club, roster.alice) == {
            ClubRole.MEMBER,
            ClubRole.OWNER,
        }
        async with session_factory() as session:
            owners = await ClubMembershipService(session).list_by_club_and_role(
                roster.club, ClubRole.OWNER
            )
        assert [m.member_id for m in owners] == [roster.alice.id]


@pytest.mark.asyncio
class TestAdministrativeOverride:

    async def test_admin_transfers_on_behalf_of_owner(self, session_factory, roster):
        """
        Scenario: an administrator without any membership moves ownership.
        Expected: the club's single owner is resolved and demoted.
        """
        async with unit_of_work(session_factory) as session:
            await ClubOwnerService(session).transfer_ownership(
                roster.club.id, roster.carol.id, True, False, roster.admin.id
            )

        assert await roles_of(session_factory, roster.club, roster.alice) == {ClubRole.MEMBER}
        assert await roles_of(session_factory, roster.club, roster.carol) == {
            ClubRole.MEMBER,
            ClubRole.OWNER,
        }
        assert await roles_of(session_factory, roster.club, roster.admin) is None

    async def test_admin_who_is_plain_member_uses_override(self, session_factory, roster):
        """
        Scenario: an administrator holding only MEMBER in the club moves ownership.
        Expected: the club's owner is demoted; the administrator gains nothing.
        """
        async with unit_of_work(session_factory) as session:
            club = await ClubService(session).require_club(roster.club.id)
            await ClubMembershipService(session).enroll(club, roster.admin)

        async with unit_of_work(session_factory) as session:
            await ClubOwnerService(session).transfer_ownership(
                roster.club.id, roster.carol.id, True, False, roster.admin.id
            )

        assert await roles_of(session_factory, roster.club, roster.admin) == {ClubRole.MEMBER}
        assert await roles_of(session_factory, roster.club, roster.alice) == {ClubRole.MEMBER}
        assert await roles_of(session_factory, roster.club, roster.carol) == {
            ClubRole.MEMBER,
            ClubRole.OWNER,
        }

    async def test_admin_transfer_to_current_owner_rejected(self, session, roster):
        with pytest.raises(InvalidArgumentError):
            await ClubOwnerService(session).transfer_ownership(
                roster.club.id, roster.alice.id, True, False, roster.admin.id
            )

    async def test_co_owned_club_is_corrupt_for_override(self, session_factory, roster):
        async with unit_of_work(session_factory) as session:
            await ClubOwnerService(session).transfer_ownership(
                roster.club.id, roster.bob.id, False, False, roster.alice.id
            )

        with pytest.raises(IllegalStateError):
            async with unit_of_work(session_factory) as session:
                await ClubOwnerService(session).transfer_ownership(
                    roster.club.id, roster.carol.id, True, False, roster.admin.id
                )

        assert ClubRole.OWNER not in await roles_of(session_factory, roster.club, roster.carol)

    async def test_ownerless_club_is_corrupt(self, session_factory, roster):
        async with unit_of_work(session_factory) as session:
            club = await ClubService(session).require_club(roster.club.id)
            await ClubMembershipService(session).deregister(roster.alice, club, force=True)

        with pytest.raises(IllegalStateError):
            async with unit_of_work(session_factory) as session:
                await ClubOwnerService(session).transfer_ownership(
                    roster.club.id, roster.bob.id, True, False, roster.admin.id
                )

    async def test_co_owner_can_still_self_serve(self, session_factory, roster):
        async with unit_of_work(session_factory) as session:
            await ClubOwnerService(session).transfer_ownership(
                roster.club.id, roster.bob.id, False, False, roster.alice.id
            )
        async with unit_of_work(session_factory) as session:
            await ClubOwnerService(session).transfer_ownership(
                roster.club.id, roster.carol.id, True, False, roster.bob.id
            )

        assert ClubRole.OWNER in await roles_of(session_factory, roster.club, roster.alice)
        assert ClubRole.OWNER not in await roles_of(session_factory, roster.club, roster.bob)
        assert ClubRole.OWNER in await roles_of(session_factory, roster.club, roster.carol)


@pytest.mark.asyncio
class TestFailuresLeaveNoTrace:

    async def test_unknown_club(self, session, roster):
        with pytest.raises(ClubNotFoundError):
            await ClubOwnerService(session).transfer_ownership(
                uuid.uuid4(), roster.bob.id, True, False, roster.alice.id
            )

    async def test_unknown_new_owner(self, session, roster):
        with pytest.raises(UserNotFoundError):
            await ClubOwnerService(session).transfer_ownership(
                roster.club.id, uuid.uuid4(), True, False, roster.alice.id
            )

    async def test_new_owner_not_a_member(self, session_factory, roster):
        with pytest.raises(MembershipNotFoundError):
            async with unit_of_work(session_factory) as session:
                await ClubOwnerService(session).transfer_ownership(
                    roster.club.id, roster.dave.id, True, False, roster.alice.id
                )

        assert await roles_of(session_factory, roster.club, roster.alice) == {
            ClubRole.MEMBER,
            ClubRole.OWNER,
        }

    async def test_failure_after_promotion_rolls_back(self, session_factory, roster, monkeypatch):
        """
        Scenario: demoting the old owner fails after the new owner was promoted.
        Expected: the unit of work rolls back the promotion as well.
        """

        async def fail(*args, **kwargs):
            raise RuntimeError("storage unavailable")

        with pytest.raises(RuntimeError):
            async with unit_of_work(session_factory) as session:
                service = ClubOwnerService(session)
                monkeypatch.setattr(service.membership_service, "remove_role", fail)
                await service.transfer_ownership(
                    roster.club.id, roster.bob.id, True, False, roster.alice.id
                )

        assert await roles_of(session_factory, roster.club, roster.bob) == {ClubRole.MEMBER}
        assert ClubRole.OWNER in await roles_of(session_factory, roster.club, roster.alice)


@pytest.mark.asyncio
class TestModerators:

    async def test_promote_and_demote(self, session, roster):
        service = ClubOwnerService(session)

        promoted = await service.promote_to_moderator(roster.club.id, roster.bob.id)
        assert promoted.roles == {ClubRole.MEMBER, ClubRole.MODERATOR}

        demoted = await service.demote_moderator(roster.club.id, roster.bob.id)
        assert demoted.roles == {ClubRole.MEMBER}

    async def test_promote_non_member(self, session, roster):
        with pytest.raises(MembershipNotFoundError):
            await ClubOwnerService(session).promote_to_moderator(roster.club.id, roster.dave.id)


@pytest.mark.asyncio
class TestConcurrentTransfers:

    async def test_transfer_losing_race_rolls_back(self, session_factory, roster, monkeypatch):
        """
        Scenario: transfer A (to bob) commits after transfer B (to carol) has
        resolved alice as the old owner but before B writes.
        Expected: B fails with ConcurrentModificationError and leaves bob as
        the only owner.
        """
        with pytest.raises(ConcurrentModificationError):
            async with unit_of_work(session_factory) as session:
                service = ClubOwnerService(session)
                promote = service.membership_service.modify_role

                async def promote_after_competing_transfer(*args, **kwargs):
                    async with unit_of_work(session_factory) as other:
                        await ClubOwnerService(other).transfer_ownership(
                            roster.club.id, roster.bob.id, True, False, roster.admin.id
                        )
                    return await promote(*args, **kwargs)

                monkeypatch.setattr(
                    service.membership_service, "modify_role", promote_after_competing_transfer
                )
                await service.transfer_ownership(
                    roster.club.id, roster.carol.id, True, False, roster.admin.id
                )

        async with session_factory() as session:
            owners = await ClubMembershipService(session).list_by_club_and_role(
                roster.club, ClubRole.OWNER
            )
        assert [m.member_id for m in owners] == [roster.bob.id]
        assert await roles_of(session_factory, roster.club, roster.carol) == {ClubRole.MEMBER}
        assert await roles_of(session_factory, roster.club, roster.alice) == {ClubRole.MEMBER}
