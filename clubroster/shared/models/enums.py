"""
Enums used across the application.
"""

from enum import Enum


class ClubRole(str, Enum):
    """
    Per-club capability tag held by a membership.

    Roles are additive: a membership holds a SET of roles, and MEMBER is the
    baseline every membership keeps. Exactly one membership per club holds
    OWNER.
    """

    MEMBER = "MEMBER"
    MODERATOR = "MODERATOR"
    OWNER = "OWNER"

    @property
    def rank(self) -> int:
        """Precedence used when reporting a member's highest role."""
        return _CLUB_ROLE_RANK[self]


_CLUB_ROLE_RANK = {
    ClubRole.MEMBER: 0,
    ClubRole.MODERATOR: 1,
    ClubRole.OWNER: 2,
}


class GlobalRole(str, Enum):
    """System-wide role of a user account."""

    USER = "USER"
    ADMINISTRATOR = "ADMINISTRATOR"
