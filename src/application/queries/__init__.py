"""Application queries (CQRS read side).

Usage:
    from src.application.queries import ListNotifications
"""

from src.application.queries.notification_queries import (
    CountUnreadNotifications,
    GetNotificationPreferences,
    ListNotifications,
    NotificationFilter,
)

__all__ = [
    "CountUnreadNotifications",
    "GetNotificationPreferences",
    "ListNotifications",
    "NotificationFilter",
]
