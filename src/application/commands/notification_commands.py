"""Notification commands (CQRS write operations).

All commands are immutable (frozen=True) and keyword-only (kw_only=True).
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class MarkNotificationRead:
    """Mark one notification read.

    Attributes:
        notification_id: Notification to mark.
        user_id: Acting user (must be the recipient).
    """

    notification_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class MarkAllNotificationsRead:
    """Mark every unread notification of a user read."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class UpdateNotificationPreferences:
    """Change some of a user's notification switches.

    Switches left as None are not changed.
    """

    user_id: UUID
    email_session_reminders: bool | None = None
    email_session_summaries: bool | None = None
    email_resource_shared: bool | None = None
    in_app_session_reminders: bool | None = None
    in_app_session_summaries: bool | None = None
    in_app_resource_shared: bool | None = None

    def changes(self) -> dict[str, bool]:
        """Switches that were given, by attribute name."""
        return {
            name: value
            for name, value in (
                ("email_session_reminders", self.email_session_reminders),
                ("email_session_summaries", self.email_session_summaries),
                ("email_resource_shared", self.email_resource_shared),
                ("in_app_session_reminders", self.in_app_session_reminders),
                ("in_app_session_summaries", self.in_app_session_summaries),
                ("in_app_resource_shared", self.in_app_resource_shared),
            )
            if value is not None
        }
