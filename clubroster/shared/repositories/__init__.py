"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data
access. They flush but never commit.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD operations
         │
         ├── UserRepository             ← Lookup by username, club rosters
         ├── ClubRepository             ← Clubs of a member
         └── ClubMembershipRepository   ← Keyed membership store, row locks
"""

from clubroster.shared.repositories.base import BaseRepository
from clubroster.shared.repositories.user_repository import UserRepository
from clubroster.shared.repositories.club_repository import ClubRepository
from clubroster.shared.repositories.club_membership_repository import (
    ClubMembershipRepository,
)

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "ClubRepository",
    "ClubMembershipRepository",
]
