"""
Authentication & Authorization Dependencies

FastAPI dependencies that identify the acting user and check their standing
in the club named by the `club_id` path parameter.

Dependency Hierarchy:
=====================
    get_current_user_token()  ← Extract and validate JWT from header
           │
           ▼
    get_current_user()        ← Load the User named by the token
           │
           ▼
    require_club_role(...)    ← Acting user holds one of the roles in the
                                club, or is an administrator

Type Aliases:
=============
    CurrentUser     - Authenticated User
    ClubMember      - Any member of the club (or administrator)
    ClubModerator   - Moderator or owner of the club (or administrator)
    ClubOwner       - Owner of the club (or administrator)

Usage:
======
    from clubroster.api.dependencies.auth import ClubOwner

    @router.delete("/{club_id}")
    async def delete_club(club_id: UUID, current_user: ClubOwner, db: DbSession):
        ...
"""

from typing import Annotated, Callable, Coroutine, Any, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from clubroster.api.dependencies.database import DbSession
from clubroster.config.settings import settings
from clubroster.shared.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    UserNotFoundError,
)
from clubroster.shared.core.logging import get_logger, log_context
from clubroster.shared.models.enums import ClubRole
from clubroster.shared.models.user import User
from clubroster.shared.services.club_membership_service import ClubMembershipService
from clubroster.shared.services.club_service import ClubService
from clubroster.shared.services.user_service import UserService
from clubroster.shared.utils.security import SecurityUtils


logger = get_logger(__name__)

# Security scheme for Bearer tokens; missing credentials surface as 401 below
security = HTTPBearer(auto_error=False)


async def get_current_user_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> dict:
    """
    Extract and validate JWT token from Authorization header.

    Raises:
        AuthenticationError: If token is missing or invalid
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")

    try:
        return SecurityUtils.decode_access_token(
            credentials.credentials,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


async def get_current_user(
    token: Annotated[dict, Depends(get_current_user_token)],
    db: DbSession,
) -> User:
    """
    Load the acting user named by the token's `user_id` claim.

    Raises:
        AuthenticationError: Claim missing, malformed, or naming no user
    """
    raw_user_id = token.get("user_id")
    if not raw_user_id:
        raise AuthenticationError("Invalid token payload")

    try:
        user_id = UUID(str(raw_user_id))
    except ValueError as e:
        raise AuthenticationError("Invalid token payload") from e

    try:
        user = await UserService(db).require_user(user_id)
    except UserNotFoundError as e:
        raise AuthenticationError("Unknown user") from e

    log_context(acting_user_id=str(user.id))
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


def require_club_role(
    *roles: ClubRole,
) -> Callable[..., Coroutine[Any, Any, User]]:
    """
    Build a dependency admitting administrators and members of the path's
    club holding any of `roles`.

    An unknown club yields 404 before any authorization decision.
    """
    accepted = frozenset(roles)

    async def dependency(club_id: UUID, current_user: CurrentUser, db: DbSession) -> User:
        club = await ClubService(db).require_club(club_id)
        if current_user.is_administrator:
            return current_user

        membership = await ClubMembershipService(db).find_membership(club.id, current_user.id)
        if membership is not None and membership.roles & accepted:
            return current_user

        logger.info(
            "Club access denied",
            club_id=str(club.id),
            user_id=str(current_user.id),
            required=sorted(role.value for role in accepted),
        )
        raise AuthorizationError(
            "You do not have the required role in this club",
            details={"required_roles": sorted(role.value for role in accepted)},
        )

    return dependency


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

ClubMember = Annotated[User, Depends(require_club_role(ClubRole.MEMBER))]
ClubModerator = Annotated[User, Depends(require_club_role(ClubRole.MODERATOR, ClubRole.OWNER))]
ClubOwner = Annotated[User, Depends(require_club_role(ClubRole.OWNER))]
