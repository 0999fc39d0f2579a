"""Notification preferences database model (one row per user)."""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, true
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


def _switch() -> Mapped[bool]:
    return mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=true(),
    )


class NotificationPreferences(BaseMutableModel):
    """Per-user notification switches, all enabled by default."""

    __tablename__ = "notification_preferences"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )

    email_session_reminders: Mapped[bool] = _switch()
    email_session_summaries: Mapped[bool] = _switch()
    email_resource_shared: Mapped[bool] = _switch()
    in_app_session_reminders: Mapped[bool] = _switch()
    in_app_session_summaries: Mapped[bool] = _switch()
    in_app_resource_shared: Mapped[bool] = _switch()
