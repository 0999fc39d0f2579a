"""Notification event kinds.

Each kind has exactly one payload dataclass in
``src.domain.events.notification_events`` and one handler method per
delivery channel (``handle_<value>``).

Usage:
    from src.domain.enums import NotificationKind

    bus.subscribe(NotificationKind.SESSION_REMINDER, handler)
"""

from enum import Enum


class NotificationKind(str, Enum):
    """Kinds of notification events.

    String Enum:
        Values are stored verbatim in the ``notifications.type`` column and
        double as the handler method suffix.
    """

    SESSION_REMINDER = "session_reminder"
    """A scheduled session starts within the reminder window."""

    SESSION_SUMMARY_POSTED = "session_summary_posted"
    """The coach attached a client-visible summary to a logged session."""

    RESOURCE_SHARED = "resource_shared"
    """The coach uploaded a resource visible to the client."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all kind values as strings.

        Returns:
            list[str]: List of kind values.
        """
        return [kind.value for kind in cls]
