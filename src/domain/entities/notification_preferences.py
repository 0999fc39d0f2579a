"""Notification preferences domain entity.

Per-user opt-in/opt-out switches keyed by (channel, kind). Every switch
defaults to enabled, and a user without a stored record is treated as having
all switches enabled; the record is created lazily on first access.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import NotificationChannel, NotificationKind

# (channel, kind) -> attribute name
PREFERENCE_FIELDS: dict[tuple[NotificationChannel, NotificationKind], str] = {
    (NotificationChannel.EMAIL, NotificationKind.SESSION_REMINDER): "email_session_reminders",
    (NotificationChannel.EMAIL, NotificationKind.SESSION_SUMMARY_POSTED): "email_session_summaries",
    (NotificationChannel.EMAIL, NotificationKind.RESOURCE_SHARED): "email_resource_shared",
    (NotificationChannel.IN_APP, NotificationKind.SESSION_REMINDER): "in_app_session_reminders",
    (NotificationChannel.IN_APP, NotificationKind.SESSION_SUMMARY_POSTED): "in_app_session_summaries",
    (NotificationChannel.IN_APP, NotificationKind.RESOURCE_SHARED): "in_app_resource_shared",
}


@dataclass
class NotificationPreferences:
    """A user's notification switches.

    Attributes:
        id: Preference record identifier.
        user_id: Owning user (one record per user).
        email_session_reminders: Email on upcoming sessions.
        email_session_summaries: Email when a summary is posted.
        email_resource_shared: Email when a resource is shared.
        in_app_session_reminders: In-app on upcoming sessions.
        in_app_session_summaries: In-app when a summary is posted.
        in_app_resource_shared: In-app when a resource is shared.

    Example:
        >>> prefs = NotificationPreferences(id=..., user_id=...)
        >>> prefs.is_enabled(NotificationChannel.EMAIL, NotificationKind.SESSION_REMINDER)
        True
    """

    id: UUID
    user_id: UUID
    email_session_reminders: bool = True
    email_session_summaries: bool = True
    email_resource_shared: bool = True
    in_app_session_reminders: bool = True
    in_app_session_summaries: bool = True
    in_app_resource_shared: bool = True

    def is_enabled(self, channel: NotificationChannel, kind: NotificationKind) -> bool:
        """Whether delivery on ``channel`` is allowed for ``kind``.

        Unknown (channel, kind) pairs are treated as enabled.
        """
        attr = PREFERENCE_FIELDS.get((channel, kind))
        if attr is None:
            return True
        return bool(getattr(self, attr))

    def apply(self, changes: dict[str, bool]) -> None:
        """Set the given switches, leaving the rest untouched.

        Raises:
            ValueError: If a key is not a preference switch.
        """
        allowed = set(PREFERENCE_FIELDS.values())
        for name, value in changes.items():
            if name not in allowed:
                raise ValueError(f"Unknown preference: {name}")
            setattr(self, name, value)
