"""Client profile database model.

Stores the recurring weekly schedule and the derived next session instant
scanned by the reminder job.

Indexes:
    - idx_client_profiles_next_session: (next_session_date) for the
      reminder window query
    - coach_id: for resource fan-out to a coach's clients
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class ClientProfile(BaseMutableModel):
    """Coaching client.

    Fields:
        coach_id: Owning coach profile
        user_id: Linked user account (NULL for offline/invited clients)
        client_type: registered, offline or invited
        display_name: Name for clients without an account
        schedule_day: 0 (Sunday) to 6 (Saturday)
        schedule_time: Local HH:MM
        schedule_timezone: IANA timezone id
        next_session_date: Next session start (UTC)
        session_count: Logged sessions, incremented in SQL
        last_activity_date: Last logged session
        deleted_at: Soft delete marker
    """

    __tablename__ = "client_profiles"

    coach_id: Mapped[UUID] = mapped_column(
        ForeignKey("coach_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="Linked user account (NULL for offline clients)",
    )

    client_type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="registered",
    )

    display_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    schedule_day: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Weekday 0 (Sunday) - 6 (Saturday)",
    )

    schedule_time: Mapped[str | None] = mapped_column(
        String(5),
        nullable=True,
        comment="Local start time HH:MM",
    )

    schedule_timezone: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
        comment="IANA timezone of the schedule",
    )

    next_session_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Next session start (UTC)",
    )

    session_count: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default="0",
    )

    last_activity_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    __table_args__ = (
        Index("idx_client_profiles_next_session", "next_session_date"),
    )
