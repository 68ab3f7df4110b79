import pytest
from sqlalchemy import func, select

from clubroster.shared.core.exceptions import ConcurrentModificationError
from clubroster.shared.models import ClubMembership, ClubMembershipRole, ClubRole, MembershipKey
from clubroster.shared.repositories import ClubMembershipRepository


@pytest.mark.asyncio
class TestLookups:

    async def test_find_returns_membership_with_roles(self, session, roster):
        repo = ClubMembershipRepository(session)

        membership = await repo.find(roster.club.id, roster.alice.id)

        assert membership is not None
        assert membership.roles == {ClubRole.MEMBER, ClubRole.OWNER}
        assert membership.version == 1

    async def test_find_missing_returns_none(self, session, roster):
        repo = ClubMembershipRepository(session)

        assert await repo.find(roster.club.id, roster.dave.id) is None

    async def test_find_by_key(self, session, roster):
        repo = ClubMembershipRepository(session)

        membership = await repo.find_by_key(MembershipKey(roster.club.id, roster.bob.id))

        assert membership.key == (roster.club.id, roster.bob.id)

    async def test_find_by_club_and_role(self, session, roster):
        repo = ClubMembershipRepository(session)

        owners = await repo.find_by_club_and_role(roster.club.id, ClubRole.OWNER)
        members = await repo.find_by_club_and_role(roster.club.id, ClubRole.MEMBER, for_update=True)

        assert [m.member_id for m in owners] == [roster.alice.id]
        assert {m.member_id for m in members} == {roster.alice.id, roster.bob.id, roster.carol.id}

    async def test_find_all_by_club_and_member(self, session, roster):
        repo = ClubMembershipRepository(session)

        assert len(await repo.find_all_by_club(roster.club.id)) == 3
        assert len(await repo.find_all_by_member(roster.bob.id)) == 1
        assert await repo.find_all_by_member(roster.dave.id) == []


@pytest.mark.asyncio
class TestWrites:

    async def test_role_change_bumps_version(self, session, roster):
        repo = ClubMembershipRepository(session)
        membership = await repo.find(roster.club.id, roster.bob.id, for_update=True)

        membership.roles = membership.roles | {ClubRole.MODERATOR}
        await repo.save(membership)
        await session.commit()

        assert membership.version == 2
        assert membership.roles == {ClubRole.MEMBER, ClubRole.MODERATOR}

    async def test_delete_removes_role_rows(self, session, roster):
        repo = ClubMembershipRepository(session)
        membership = await repo.find(roster.club.id, roster.bob.id)

        await repo.delete(membership)
        await session.commit()

        remaining = await session.execute(
            select(func.count())
            .select_from(ClubMembershipRole)
            .where(ClubMembershipRole.member_id == roster.bob.id)
        )
        assert remaining.scalar() == 0
        assert await repo.find(roster.club.id, roster.bob.id) is None

    async def test_duplicate_key_is_a_conflict(self, session, roster):
        repo = ClubMembershipRepository(session)
        duplicate = ClubMembership(club_id=roster.club.id, member_id=roster.bob.id)
        duplicate.roles = {ClubRole.MEMBER}

        with pytest.raises(ConcurrentModificationError):
            await repo.save(duplicate)

    async def test_lost_update_is_detected(self, session_factory, roster):
        """
        Scenario: two transactions read the owner's membership; the second
        one commits a change first.
        Expected: the first one's flush fails instead of overwriting it.
        """
        async with session_factory() as first, session_factory() as second:
            stale = await ClubMembershipRepository(first).find(roster.club.id, roster.alice.id)
            fresh = await ClubMembershipRepository(second).find(roster.club.id, roster.alice.id)

            fresh.roles = fresh.roles | {ClubRole.MODERATOR}
            await ClubMembershipRepository(second).save(fresh)
            await second.commit()

            stale.roles = stale.roles - {ClubRole.OWNER}
            with pytest.raises(ConcurrentModificationError):
                await ClubMembershipRepository(first).save(stale)
            await first.rollback()

        async with session_factory() as check:
            current = await ClubMembershipRepository(check).find(roster.club.id, roster.alice.id)
            assert current.roles == {ClubRole.MEMBER, ClubRole.MODERATOR, ClubRole.OWNER}
