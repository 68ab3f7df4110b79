# pylint: skip-file
# ruff: noqa
"""Initial schema - users, clubs and memberships

Revision ID: 001
Revises:
Create Date: 2025-03-01 00:00:00

Tables created:
- users: User identities referenced by memberships
- clubs: Clubs and their (immutable) creator
- club_memberships: One row per (club, member), with optimistic-lock version
- club_membership_roles: One row per role held by a membership

Enums created:
- globalrole: USER, ADMINISTRATOR
- clubrole: MEMBER, MODERATOR, OWNER
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# Enum types
global_role_enum = postgresql.ENUM(
    "USER",
    "ADMINISTRATOR",
    name="globalrole",
    create_type=False,
)

club_role_enum = postgresql.ENUM(
    "MEMBER",
    "MODERATOR",
    "OWNER",
    name="clubrole",
    create_type=False,
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    # Create enum types
    op.execute("CREATE TYPE globalrole AS ENUM ('USER', 'ADMINISTRATOR')")
    op.execute("CREATE TYPE clubrole AS ENUM ('MEMBER', 'MODERATOR', 'OWNER')")

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("username", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("global_role", global_role_enum, nullable=False, server_default="USER"),
        *_timestamps(),
    )

    # Create clubs table
    op.create_table(
        "clubs",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False, index=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "creator_id",
            sa.Uuid(),
            sa.ForeignKey("users.id"),
            nullable=False,
            index=True,
        ),
        *_timestamps(),
    )

    # Create club_memberships table
    op.create_table(
        "club_memberships",
        sa.Column(
            "club_id",
            sa.Uuid(),
            sa.ForeignKey("clubs.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "member_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            primary_key=True,
            index=True,
        ),
        sa.Column("joined_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
    )

    # Create club_membership_roles table
    op.create_table(
        "club_membership_roles",
        sa.Column("club_id", sa.Uuid(), primary_key=True),
        sa.Column("member_id", sa.Uuid(), primary_key=True),
        sa.Column("role", club_role_enum, primary_key=True),
        sa.ForeignKeyConstraint(
            ["club_id", "member_id"],
            ["club_memberships.club_id", "club_memberships.member_id"],
            ondelete="CASCADE",
        ),
    )

    # Owner lookups scan by (club_id, role)
    op.create_index(
        "ix_club_membership_roles_club_id_role",
        "club_membership_roles",
        ["club_id", "role"],
    )


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse order (respect foreign keys)
    op.drop_index("ix_club_membership_roles_club_id_role", table_name="club_membership_roles")
    op.drop_table("club_membership_roles")
    op.drop_table("club_memberships")
    op.drop_table("clubs")
    op.drop_table("users")

    # Drop enum types
    op.execute("DROP TYPE IF EXISTS clubrole")
    op.execute("DROP TYPE IF EXISTS globalrole")
