"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), CurrentUser
- Club authorization: ClubMember, ClubModerator, ClubOwner
- Services: get_*_service() functions

Usage:
======
    from clubroster.api.dependencies import DbSession, ClubModerator

    @router.delete("/{club_id}/members/{user_id}")
    async def remove_member(club_id: UUID, user_id: UUID, _: ClubModerator, db: DbSession):
        ...
"""

from clubroster.api.dependencies.database import (
    get_db,
    DbSession,
)
from clubroster.api.dependencies.auth import (
    get_current_user,
    get_current_user_token,
    require_club_role,
    CurrentUser,
    ClubMember,
    ClubModerator,
    ClubOwner,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_current_user",
    "get_current_user_token",
    "require_club_role",
    "CurrentUser",
    "ClubMember",
    "ClubModerator",
    "ClubOwner",
]
