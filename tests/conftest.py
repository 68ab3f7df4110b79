"""
Shared fixtures.

Every test gets its own file-backed SQLite database (aiosqlite) with the
full schema, so separate sessions see each other's commits the way
concurrent requests do.
"""

from dataclasses import dataclass

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from clubroster.api.dependencies.database import get_db
from clubroster.api.main import app
from clubroster.shared.db.session import unit_of_work
from clubroster.shared.models import Base, Club, GlobalRole, User
from clubroster.shared.services import ClubMembershipService, ClubService, UserService


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'clubroster.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@dataclass
class Roster:
    """A club owned by its creator alice, with bob and carol as plain members."""

    club: Club
    alice: User
    bob: User
    carol: User
    dave: User
    admin: User


@pytest_asyncio.fixture
async def roster(session_factory) -> Roster:
    """
    Seeded and committed in its own session; dave is registered but not a
    member, admin is a global administrator outside the club.
    """
    async with unit_of_work(session_factory) as session:
        users = UserService(session)
        alice = await users.register_user("alice", "Alice Liddell")
        bob = await users.register_user("bob", "Bob Cratchit")
        carol = await users.register_user("carol", "Carol Danvers")
        dave = await users.register_user("dave", "Dave Bowman")
        admin = await users.register_user("admin", "Site Admin", GlobalRole.ADMINISTRATOR)

        club = await ClubService(session).register_club("Thursday Readers", "Long novels", alice)
        membership_service = ClubMembershipService(session)
        await membership_service.enroll(club, bob)
        await membership_service.enroll(club, carol)

    return Roster(club=club, alice=alice, bob=bob, carol=carol, dave=dave, admin=admin)


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with unit_of_work(session_factory) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {UserService.issue_access_token(user)}"}

    return _headers
