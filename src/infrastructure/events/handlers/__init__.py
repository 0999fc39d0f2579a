"""Notification delivery handlers.

Handlers:
    - EmailNotificationHandler: Sends email through EmailProtocol
    - InAppNotificationHandler: Stores Notification rows

Both expose one ``handle_<kind>`` method per NotificationKind; the container
subscribes them from NOTIFICATION_REGISTRY.
"""

from src.infrastructure.events.handlers.email_notification_handler import (
    EmailNotificationHandler,
)
from src.infrastructure.events.handlers.in_app_notification_handler import (
    InAppNotificationHandler,
)

__all__ = [
    "EmailNotificationHandler",
    "InAppNotificationHandler",
]
