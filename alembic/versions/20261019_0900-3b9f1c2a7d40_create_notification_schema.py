"""create_notification_schema

Revision ID: 3b9f1c2a7d40
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3b9f1c2a7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_and_timestamps(*, mutable: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]
    if mutable:
        columns.append(
            sa.Column(
                "updated_at",
                sa.DateTime(timezone=True),
                server_default=sa.func.now(),
                nullable=False,
            )
        )
    return columns


def _switch(name: str) -> sa.Column:
    return sa.Column(name, sa.Boolean(), server_default=sa.true(), nullable=False)


def upgrade() -> None:
    """Create users, coaching and notification tables."""
    op.create_table(
        "users",
        *_id_and_timestamps(),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="User email address (unique)",
        ),
        sa.Column(
            "username",
            sa.String(length=100),
            nullable=True,
            comment="Display name used in greetings",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "coach_profiles",
        *_id_and_timestamps(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )

    op.create_table(
        "client_profiles",
        *_id_and_timestamps(),
        sa.Column("coach_id", sa.Uuid(), nullable=False),
        sa.Column(
            "user_id",
            sa.Uuid(),
            nullable=True,
            comment="Linked user account (NULL for offline clients)",
        ),
        sa.Column("client_type", sa.String(length=20), nullable=False),
        sa.Column("display_name", sa.String(length=255), nullable=True),
        # Recurring weekly schedule
        sa.Column(
            "schedule_day",
            sa.Integer(),
            nullable=True,
            comment="Weekday 0 (Sunday) - 6 (Saturday)",
        ),
        sa.Column(
            "schedule_time",
            sa.String(length=5),
            nullable=True,
            comment="Local start time HH:MM",
        ),
        sa.Column(
            "schedule_timezone",
            sa.String(length=64),
            nullable=True,
            comment="IANA timezone of the schedule",
        ),
        sa.Column(
            "next_session_date",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Next session start (UTC)",
        ),
        sa.Column("session_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("last_activity_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["coach_id"], ["coach_profiles.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_client_profiles_coach_id", "client_profiles", ["coach_id"])
    op.create_index("ix_client_profiles_user_id", "client_profiles", ["user_id"])
    op.create_index(
        "idx_client_profiles_next_session", "client_profiles", ["next_session_date"]
    )

    op.create_table(
        "coach_sessions",
        *_id_and_timestamps(mutable=False),
        sa.Column("coach_id", sa.Uuid(), nullable=False),
        sa.Column("client_id", sa.Uuid(), nullable=False),
        sa.Column("session_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("session_number", sa.Integer(), nullable=False),
        sa.Column("topic", sa.String(length=255), nullable=True),
        sa.Column("private_notes", sa.Text(), nullable=True),
        sa.Column("shared_summary", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(
            ["coach_id"], ["coach_profiles.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["client_id"], ["client_profiles.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_coach_sessions_coach_id", "coach_sessions", ["coach_id"])
    op.create_index("ix_coach_sessions_client_id", "coach_sessions", ["client_id"])

    op.create_table(
        "resources",
        *_id_and_timestamps(),
        sa.Column("coach_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("file_type", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(
            ["coach_id"], ["coach_profiles.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_resources_coach_id", "resources", ["coach_id"])

    op.create_table(
        "notifications",
        *_id_and_timestamps(mutable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("type", sa.String(length=50), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("read", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column(
            "metadata",
            sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
            nullable=True,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_notifications_user_created", "notifications", ["user_id", "created_at"]
    )
    op.create_index("idx_notifications_user_read", "notifications", ["user_id", "read"])

    op.create_table(
        "notification_preferences",
        *_id_and_timestamps(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        _switch("email_session_reminders"),
        _switch("email_session_summaries"),
        _switch("email_resource_shared"),
        _switch("in_app_session_reminders"),
        _switch("in_app_session_summaries"),
        _switch("in_app_resource_shared"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_table("notification_preferences")
    op.drop_index("idx_notifications_user_read", table_name="notifications")
    op.drop_index("idx_notifications_user_created", table_name="notifications")
    op.drop_table("notifications")
    op.drop_index("ix_resources_coach_id", table_name="resources")
    op.drop_table("resources")
    op.drop_index("ix_coach_sessions_client_id", table_name="coach_sessions")
    op.drop_index("ix_coach_sessions_coach_id", table_name="coach_sessions")
    op.drop_table("coach_sessions")
    op.drop_index("idx_client_profiles_next_session", table_name="client_profiles")
    op.drop_index("ix_client_profiles_user_id", table_name="client_profiles")
    op.drop_index("ix_client_profiles_coach_id", table_name="client_profiles")
    op.drop_table("client_profiles")
    op.drop_table("coach_profiles")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
