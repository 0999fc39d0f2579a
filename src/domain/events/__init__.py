"""Domain events package.

Usage:
    from src.domain.events import SessionReminder, NotificationEvent
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.notification_events import (
    NotificationEvent,
    ResourceShared,
    SessionReminder,
    SessionSummaryPosted,
)
from src.domain.events.registry import (
    NOTIFICATION_REGISTRY,
    NotificationMetadata,
    get_kinds_for_channel,
    get_metadata,
)

__all__ = [
    "DomainEvent",
    "NotificationEvent",
    "SessionReminder",
    "SessionSummaryPosted",
    "ResourceShared",
    "NOTIFICATION_REGISTRY",
    "NotificationMetadata",
    "get_kinds_for_channel",
    "get_metadata",
]
