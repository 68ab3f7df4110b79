"""
Base Repository

Generic async data access shared by the entity repositories.

    class ClubRepository(BaseRepository[Club]):
        def __init__(self, session):
            super().__init__(Club, session)

    club = await ClubRepository(session).get(club_id)   # Optional[Club]

Repositories never commit. Every write ends in flush(): the SQL reaches the
database inside the caller's transaction and is committed or rolled back by
unit_of_work() / get_db() together with the rest of the operation.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from clubroster.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Lookup, create and delete for one mapped class.

    Attributes:
        model: Mapped class handled by this repository
        session: Session of the current unit of work
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    async def get(self, record_id: Any) -> Optional[ModelType]:
        """
        Primary-key lookup, served from the identity map when already loaded.

        `record_id` is a UUID for users and clubs and a (club_id, member_id)
        tuple for memberships.
        """
        return await self.session.get(self.model, record_id)

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Insert a new row and return it with its database defaults loaded.

        Example:
            club = await repo.create(name="Readers", creator_id=alice.id)
            club.created_at  # set by the database
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, instance: ModelType) -> None:
        """Delete a loaded row; ORM cascades on the model run in the same flush."""
        await self.session.delete(instance)
        await self.session.flush()

