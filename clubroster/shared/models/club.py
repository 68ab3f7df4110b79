"""
Club Entity Model

A community that users join. The creator is immutable history; the current
owner is whoever holds the OWNER role on a ClubMembership, and may change.

SAMPLE CLUB RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ name             │ "Thursday Readers"                                        │
│ description      │ "Slow reading of long novels"                             │
│ creator_id       │ 660e8400-e29b-41d4-a716-446655440000                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from clubroster.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from clubroster.shared.models.user import User
    from clubroster.shared.models.club_membership import ClubMembership


class Club(Base, TimestampMixin):
    """
    Club model.

    Attributes:
        id: Unique identifier (UUID v4)
        name: Display name
        description: Optional free-text description
        creator_id: User who created the club (never changes)

    Relationships:
        creator: The user who created the club
        memberships: Memberships in this club (deleted with the club)
    """

    __tablename__ = "clubs"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )

    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    creator_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    creator: Mapped["User"] = relationship(
        "User",
        back_populates="created_clubs",
    )

    memberships: Mapped[list["ClubMembership"]] = relationship(
        "ClubMembership",
        back_populates="club",
        cascade="all, delete",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Club(id={self.id}, name={self.name})>"
