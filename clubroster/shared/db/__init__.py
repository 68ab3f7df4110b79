"""
Database Module

This module provides database connectivity and session management for
Clubroster.

Architecture Overview:
======================
    FastAPI Route / library caller
        │
        │  get_db() / unit_of_work()
        ▼
    AsyncSession (one transaction)
        │
        │  passed to services, which build repositories on it
        ▼
    Repositories (flush only)
        │
        ▼
    PostgreSQL

Usage:
======
    from clubroster.shared.db import unit_of_work
    from clubroster.shared.services import ClubMembershipService

    async with unit_of_work() as session:
        await ClubMembershipService(session).enroll(club, user)
"""

from clubroster.shared.db.session import (
    get_db,
    unit_of_work,
    init_db,
    close_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",  # FastAPI dependency for getting a database session
    "unit_of_work",  # Transaction scope for one operation
    "init_db",  # Verify database on app startup
    "close_db",  # Close database on app shutdown
    "AsyncSessionLocal",  # Session factory for manual session creation
    "engine",  # Database engine (for migrations, etc.)
]
