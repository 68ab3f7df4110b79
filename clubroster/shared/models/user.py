"""
User Entity Model

Represents a user identity. The governance core only references users;
their profile lifecycle is managed elsewhere.

Model Hierarchy:
================
    User
       ├── memberships (ClubMembership[]) - Clubs this user belongs to
       └── created_clubs (Club[])         - Clubs this user created

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ username         │ "alice"                                                   │
│ display_name     │ "Alice Liddell"                                           │
│ global_role      │ USER                                                      │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import String, Uuid, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from clubroster.shared.models.base import Base, TimestampMixin
from clubroster.shared.models.enums import GlobalRole


# TYPE_CHECKING block prevents circular imports while enabling type hints
if TYPE_CHECKING:
    from clubroster.shared.models.club import Club
    from clubroster.shared.models.club_membership import ClubMembership


class User(Base, TimestampMixin):
    """
    User model representing a member identity.

    Attributes:
        id: Unique identifier (UUID v4)
        username: Unique login/display handle
        display_name: Human-readable name
        global_role: USER or ADMINISTRATOR

    Relationships:
        memberships: Club memberships held by this user
        created_clubs: Clubs this user created
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # IDENTITY
    # ═══════════════════════════════════════════════════════════════════════════

    username: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    display_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    # Administrators may override club ownership when the owner is unreachable
    global_role: Mapped[GlobalRole] = mapped_column(
        SQLEnum(GlobalRole, name="globalrole"),
        nullable=False,
        default=GlobalRole.USER,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    memberships: Mapped[list["ClubMembership"]] = relationship(
        "ClubMembership",
        back_populates="member",
        cascade="all, delete",
    )

    created_clubs: Mapped[list["Club"]] = relationship(
        "Club",
        back_populates="creator",
        passive_deletes=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    @property
    def is_administrator(self) -> bool:
        """True for accounts holding the ADMINISTRATOR global role."""
        return self.global_role == GlobalRole.ADMINISTRATOR

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, username={self.username})>"
