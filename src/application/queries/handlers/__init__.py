"""Query handlers."""

from src.application.queries.handlers.count_unread_notifications_handler import (
    CountUnreadNotificationsHandler,
)
from src.application.queries.handlers.get_notification_preferences_handler import (
    GetNotificationPreferencesHandler,
)
from src.application.queries.handlers.list_notifications_handler import (
    MAX_PAGE_SIZE,
    ListNotificationsHandler,
    NotificationPage,
)

__all__ = [
    "MAX_PAGE_SIZE",
    "CountUnreadNotificationsHandler",
    "GetNotificationPreferencesHandler",
    "ListNotificationsHandler",
    "NotificationPage",
]
