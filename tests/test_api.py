import uuid
from datetime import timedelta

import pytest

from clubroster.config.settings import settings
from clubroster.shared.db.session import unit_of_work
from clubroster.shared.models import ClubRole
from clubroster.shared.services import ClubMembershipService, ClubService
from clubroster.shared.utils.security import SecurityUtils


@pytest.mark.asyncio
class TestHealth:

    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_ready_and_live(self, client):
        assert (await client.get("/ready")).json() == {"status": "ready"}
        assert (await client.get("/live")).json() == {"status": "alive"}

    async def test_request_id_echoed(self, client):
        generated = await client.get("/health")
        supplied = await client.get("/health", headers={"X-Request-ID": "abc123"})

        assert generated.headers["X-Request-ID"]
        assert supplied.headers["X-Request-ID"] == "abc123"


@pytest.mark.asyncio
class TestAuthentication:

    async def test_missing_token(self, client, roster):
        response = await client.get("/clubs")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    async def test_garbage_token(self, client, roster):
        response = await client.get("/clubs", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401

    async def test_expired_token(self, client, roster):
        token = SecurityUtils.create_access_token(
            data={"user_id": str(roster.bob.id)},
            secret_key=settings.SECRET_KEY,
            expires_delta=timedelta(minutes=-1),
            algorithm=settings.JWT_ALGORITHM,
        )

        response = await client.get("/clubs", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Token has expired"


@pytest.mark.asyncio
class TestClubs:

    async def test_create_club_makes_creator_owner(self, client, roster, auth_headers):
        response = await client.post(
            "/clubs",
            json={"name": "Night Owls", "description": "Late readers"},
            headers=auth_headers(roster.dave),
        )
        assert response.status_code == 201
        club_id = response.json()["id"]

        role = await client.get(f"/clubs/{club_id}/role", headers=auth_headers(roster.dave))

        assert role.json()["role"] == "OWNER"

    async def test_list_my_clubs(self, client, roster, auth_headers):
        response = await client.get("/clubs", headers=auth_headers(roster.bob))

        body = response.json()
        assert body["total"] == 1
        assert body["data"][0]["name"] == "Thursday Readers"

    async def test_unknown_club(self, client, roster, auth_headers):
        response = await client.get(f"/clubs/{uuid.uuid4()}", headers=auth_headers(roster.bob))

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    async def test_delete_requires_owner(self, client, roster, auth_headers):
        denied = await client.delete(f"/clubs/{roster.club.id}", headers=auth_headers(roster.bob))
        allowed = await client.delete(f"/clubs/{roster.club.id}", headers=auth_headers(roster.alice))

        assert denied.status_code == 403
        assert allowed.status_code == 200
        assert (await client.get("/clubs", headers=auth_headers(roster.bob))).json()["total"] == 0


@pytest.mark.asyncio
class TestOwnMembership:

    async def test_join_and_leave(self, client, roster, auth_headers):
        headers = auth_headers(roster.dave)

        joined = await client.post(f"/clubs/{roster.club.id}/join", headers=headers)
        again = await client.post(f"/clubs/{roster.club.id}/join", headers=headers)
        left = await client.post(f"/clubs/{roster.club.id}/leave", headers=headers)

        assert joined.status_code == 200
        assert joined.json()["roles"] == ["MEMBER"]
        assert again.json()["version"] == joined.json()["version"]
        assert left.status_code == 200

    async def test_owner_cannot_leave(self, client, roster, auth_headers):
        response = await client.post(
            f"/clubs/{roster.club.id}/leave", headers=auth_headers(roster.alice)
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "OWNER_DEREGISTRATION"

    async def test_role_of_non_member(self, client, roster, auth_headers):
        response = await client.get(
            f"/clubs/{roster.club.id}/role", headers=auth_headers(roster.dave)
        )

        assert response.status_code == 404
        assert response.json()["error"]["details"]["member_id"] == str(roster.dave.id)


@pytest.mark.asyncio
class TestRoster:

    async def test_members_visible_to_members_and_admins(self, client, roster, auth_headers):
        url = f"/clubs/{roster.club.id}/members"

        as_member = await client.get(url, headers=auth_headers(roster.carol))
        as_outsider = await client.get(url, headers=auth_headers(roster.dave))
        as_admin = await client.get(url, headers=auth_headers(roster.admin))

        assert as_member.json()["total"] == 3
        assert as_outsider.status_code == 403
        assert as_admin.status_code == 200

    async def test_plain_member_cannot_moderate(self, client, roster, auth_headers):
        response = await client.delete(
            f"/clubs/{roster.club.id}/members/{roster.carol.id}",
            headers=auth_headers(roster.bob),
        )

        assert response.status_code == 403

    async def test_moderator_manages_roster(self, client, roster, auth_headers):
        promoted = await client.post(
            f"/clubs/{roster.club.id}/moderators/{roster.bob.id}",
            headers=auth_headers(roster.alice),
        )
        assert promoted.json()["roles"] == ["MEMBER", "MODERATOR"]
        moderator = auth_headers(roster.bob)

        added = await client.post(
            f"/clubs/{roster.club.id}/members",
            json={"user_id": str(roster.dave.id)},
            headers=moderator,
        )
        removed = await client.delete(
            f"/clubs/{roster.club.id}/members/{roster.carol.id}", headers=moderator
        )
        protected = await client.delete(
            f"/clubs/{roster.club.id}/members/{roster.alice.id}", headers=moderator
        )

        assert added.status_code == 201
        assert removed.status_code == 200
        assert protected.status_code == 403

    async def test_owner_role_cannot_be_set_directly(self, client, roster, auth_headers):
        response = await client.put(
            f"/clubs/{roster.club.id}/members/{roster.bob.id}/role",
            json={"role": "OWNER"},
            headers=auth_headers(roster.alice),
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_ARGUMENT"

    async def test_change_role(self, client, roster, auth_headers):
        response = await client.put(
            f"/clubs/{roster.club.id}/members/{roster.bob.id}/role",
            json={"role": "MODERATOR"},
            headers=auth_headers(roster.alice),
        )

        assert response.status_code == 200
        assert "MODERATOR" in response.json()["roles"]


@pytest.mark.asyncio
class TestOwnershipTransfer:

    async def test_owner_transfers(self, client, roster, auth_headers):
        response = await client.post(
            f"/clubs/{roster.club.id}/ownership/transfer",
            json={"new_owner_id": str(roster.bob.id)},
            headers=auth_headers(roster.alice),
        )

        assert response.status_code == 200
        assert response.json()["roles"] == ["MEMBER", "OWNER"]
        role = await client.get(f"/clubs/{roster.club.id}/role", headers=auth_headers(roster.alice))
        assert role.json()["role"] == "MEMBER"

    async def test_member_cannot_transfer(self, client, roster, auth_headers):
        response = await client.post(
            f"/clubs/{roster.club.id}/ownership/transfer",
            json={"new_owner_id": str(roster.bob.id)},
            headers=auth_headers(roster.bob),
        )

        assert response.status_code == 403

    async def test_admin_override(self, client, roster, auth_headers):
        response = await client.post(
            f"/clubs/{roster.club.id}/ownership/transfer",
            json={"new_owner_id": str(roster.carol.id), "complete_transfer": True},
            headers=auth_headers(roster.admin),
        )

        assert response.status_code == 200
        role = await client.get(f"/clubs/{roster.club.id}/role", headers=auth_headers(roster.carol))
        assert role.json()["role"] == "OWNER"

    async def test_same_user_rejected(self, client, roster, auth_headers):
        response = await client.post(
            f"/clubs/{roster.club.id}/ownership/transfer",
            json={"new_owner_id": str(roster.alice.id)},
            headers=auth_headers(roster.alice),
        )

        assert response.status_code == 400

    async def test_corrupt_club_reported(self, client, session_factory, roster, auth_headers):
        async with unit_of_work(session_factory) as session:
            club = await ClubService(session).require_club(roster.club.id)
            await ClubMembershipService(session).modify_role({ClubRole.OWNER}, roster.bob, club)

        response = await client.post(
            f"/clubs/{roster.club.id}/ownership/transfer",
            json={"new_owner_id": str(roster.carol.id)},
            headers=auth_headers(roster.admin),
        )

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "ILLEGAL_STATE"
