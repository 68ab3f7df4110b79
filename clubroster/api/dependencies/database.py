"""
Database Dependency

FastAPI dependency for database sessions.

Each request runs in one unit of work: committed after the handler returns,
rolled back if it raised.

Usage:
======
    from clubroster.api.dependencies.database import DbSession

    @router.get("/clubs/{club_id}")
    async def get_club(club_id: UUID, db: DbSession):
        return await ClubService(db).require_club(club_id)
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from clubroster.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Yields:
        AsyncSession: Database session for the current request
    """
    async for session in _get_db():
        yield session


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
