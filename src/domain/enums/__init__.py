"""Domain enums for notification and scheduling logic.

Available Enums:
    - NotificationKind: Event kinds routed through the event bus
    - NotificationChannel: Delivery channels (email, in-app)
    - Weekday: Sunday-first weekday numbering for schedules
    - ClientType: Registered, offline or invited client
"""

from src.domain.enums.client_type import ClientType
from src.domain.enums.notification_channel import NotificationChannel
from src.domain.enums.notification_kind import NotificationKind
from src.domain.enums.weekday import Weekday

__all__ = [
    "ClientType",
    "NotificationChannel",
    "NotificationKind",
    "Weekday",
]
