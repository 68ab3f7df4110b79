"""
Clubroster SQLAlchemy Models

This package contains all database models for the Clubroster application.

Model Hierarchy:
================
    User
       ├── memberships (ClubMembership[])
       └── created_clubs (Club[])

    Club
       └── memberships (ClubMembership[])
              └── role_entries (ClubMembershipRole[])

Models Overview:
================
- Base: Declarative base and timestamp mixin
- User: Identity referenced by memberships
- Club: A community users join
- ClubMembership: One user's membership in one club, with its role set
- ClubMembershipRole: One row per role held by a membership

Usage:
======
    from clubroster.shared.models import ClubMembership, ClubRole

    membership.roles = membership.roles | {ClubRole.MODERATOR}
"""

from clubroster.shared.models.base import Base, TimestampMixin
from clubroster.shared.models.enums import ClubRole, GlobalRole
from clubroster.shared.models.user import User
from clubroster.shared.models.club import Club
from clubroster.shared.models.club_membership import (
    ClubMembership,
    ClubMembershipRole,
    MembershipKey,
)

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Enums
    "ClubRole",
    "GlobalRole",
    # Core models
    "User",
    "Club",
    "ClubMembership",
    "ClubMembershipRole",
    "MembershipKey",
]
