"""Coach session database model (immutable once logged)."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class CoachSession(BaseModel):
    """A logged coaching session.

    Fields:
        coach_id: Coach profile that ran the session
        client_id: Client profile
        session_date: When the session happened (UTC)
        session_number: Running number per client
        topic: Optional topic
        private_notes: Coach-only notes
        shared_summary: Client-visible summary
    """

    __tablename__ = "coach_sessions"

    coach_id: Mapped[UUID] = mapped_column(
        ForeignKey("coach_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    client_id: Mapped[UUID] = mapped_column(
        ForeignKey("client_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    session_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    session_number: Mapped[int] = mapped_column(Integer, nullable=False)

    topic: Mapped[str | None] = mapped_column(String(255), nullable=True)

    private_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    shared_summary: Mapped[str | None] = mapped_column(Text, nullable=True)
