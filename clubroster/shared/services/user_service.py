"""
User Service

Resolves user ids to users and registers new user identities.

Usage:
======
    from clubroster.shared.services.user_service import UserService

    service = UserService(session)
    alice = await service.require_user(alice_id)
"""

from datetime import timedelta
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from clubroster.config.settings import settings
from clubroster.shared.core.exceptions import ConflictError, UserNotFoundError
from clubroster.shared.core.logging import get_logger
from clubroster.shared.models.enums import GlobalRole
from clubroster.shared.models.user import User
from clubroster.shared.repositories.user_repository import UserRepository
from clubroster.shared.utils.security import SecurityUtils


logger = get_logger(__name__)


class UserService:
    """Service for user lookup and registration."""

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize UserService.

        Args:
            session: Async database session
        """
        self.session = session
        self.user_repo = UserRepository(session)

    async def require_user(self, user_id: UUID) -> User:
        """
        Get a user by id.

        Raises:
            UserNotFoundError: No user with that id
        """
        user = await self.user_repo.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def register_user(
        self,
        username: str,
        display_name: str,
        global_role: GlobalRole = GlobalRole.USER,
    ) -> User:
        """
        Register a new user identity.

        Raises:
            ConflictError: Username already taken
        """
        if await self.user_repo.username_exists(username):
            raise ConflictError(
                message="Username already registered",
                details={"username": username},
            )

        user = await self.user_repo.create(
            username=username,
            display_name=display_name,
            global_role=global_role,
        )
        logger.info("User registered", user_id=str(user.id), username=username)
        return user

    @staticmethod
    def issue_access_token(user: User) -> str:
        """
        Create a bearer token identifying the user to the HTTP API.

        The token only carries the user id; roles are always read from the
        database.
        """
        return SecurityUtils.create_access_token(
            data={"user_id": str(user.id)},
            secret_key=settings.SECRET_KEY,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            algorithm=settings.JWT_ALGORITHM,
        )
