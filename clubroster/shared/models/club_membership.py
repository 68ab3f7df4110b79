"""
Club Membership Model

The association between one user and one club, carrying the set of roles the
user holds there. At most one membership exists per (club, member) pair, and
every membership keeps the MEMBER role for its whole life.

Tables:
=======
    club_memberships                      club_membership_roles
    ┌──────────────┬─────────┐            ┌──────────────┬─────────┐
    │ club_id   PK │ → clubs │◄───────────│ club_id   PK │         │
    │ member_id PK │ → users │◄───────────│ member_id PK │         │
    │ joined_at    │         │            │ role      PK │ enum    │
    │ updated_at   │         │            └──────────────┴─────────┘
    │ version      │         │
    └──────────────┴─────────┘

Concurrency:
============
`version` is the mapper's version counter. Every UPDATE/DELETE of a membership
row is issued as `... WHERE version = :expected`; a lost race surfaces as
StaleDataError on flush, which the repository translates to
ConcurrentModificationError. Changing `roles` always touches `updated_at`, so a
role-only change still bumps the parent row's version.
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Iterable, NamedTuple
import uuid

from sqlalchemy import (
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    ForeignKeyConstraint,
    Index,
    Integer,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from clubroster.shared.models.base import Base
from clubroster.shared.models.enums import ClubRole


if TYPE_CHECKING:
    from clubroster.shared.models.club import Club
    from clubroster.shared.models.user import User


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MembershipKey(NamedTuple):
    """Composite identity of a membership."""

    club_id: uuid.UUID
    member_id: uuid.UUID


class ClubMembership(Base):
    """
    Membership of a user in a club.

    Attributes:
        club_id: Club half of the composite key
        member_id: User half of the composite key
        joined_at: When the user joined (set once)
        updated_at: Last modification time
        version: Optimistic-lock counter
        roles: Set view over the role rows (see `roles` property)
    """

    __tablename__ = "club_memberships"

    club_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("clubs.id", ondelete="CASCADE"),
        primary_key=True,
    )

    member_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    joined_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    role_entries: Mapped[list["ClubMembershipRole"]] = relationship(
        "ClubMembershipRole",
        back_populates="membership",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    club: Mapped["Club"] = relationship(
        "Club",
        back_populates="memberships",
    )

    member: Mapped["User"] = relationship(
        "User",
        back_populates="memberships",
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # ROLE SET
    # ═══════════════════════════════════════════════════════════════════════════

    @property
    def roles(self) -> frozenset[ClubRole]:
        """Roles currently held. Returned as an immutable snapshot."""
        return frozenset(entry.role for entry in self.role_entries)

    @roles.setter
    def roles(self, value: Iterable[ClubRole]) -> None:
        target = set(value)
        existing = {entry.role: entry for entry in self.role_entries}

        for role, entry in existing.items():
            if role not in target:
                self.role_entries.remove(entry)
        for role in target - existing.keys():
            self.role_entries.append(ClubMembershipRole(role=role))

        self.updated_at = _utcnow()

    def has_role(self, role: ClubRole) -> bool:
        return any(entry.role == role for entry in self.role_entries)

    @property
    def highest_role(self) -> ClubRole:
        """OWNER > MODERATOR > MEMBER."""
        return max(self.roles, key=lambda role: role.rank, default=ClubRole.MEMBER)

    @property
    def key(self) -> MembershipKey:
        return MembershipKey(self.club_id, self.member_id)

    def __repr__(self) -> str:
        """String representation for debugging."""
        roles = ",".join(sorted(role.value for role in self.roles))
        return (
            f"<ClubMembership(club_id={self.club_id}, member_id={self.member_id}, "
            f"roles={roles}, version={self.version})>"
        )


class ClubMembershipRole(Base):
    """One role held by one membership."""

    __tablename__ = "club_membership_roles"

    club_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    member_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    role: Mapped[ClubRole] = mapped_column(
        SQLEnum(ClubRole, name="clubrole"),
        primary_key=True,
    )

    __table_args__ = (
        ForeignKeyConstraint(
            ["club_id", "member_id"],
            ["club_memberships.club_id", "club_memberships.member_id"],
            ondelete="CASCADE",
        ),
        # Owner lookups scan by (club_id, role)
        Index("ix_club_membership_roles_club_id_role", "club_id", "role"),
    )

    membership: Mapped["ClubMembership"] = relationship(
        "ClubMembership",
        back_populates="role_entries",
    )

    def __repr__(self) -> str:
        return f"<ClubMembershipRole({self.club_id}, {self.member_id}, {self.role.value})>"
