"""Notification Events Registry - Single Source of Truth.

Catalogs every notification kind with its payload class and the delivery
channels that handle it. Used for:
- Container wiring (automated subscription)
- Validation tests (every kind has a payload class and handler methods)

Adding a new kind:
1. Add a member to NotificationKind
2. Define its payload dataclass in notification_events.py
3. Add an entry to NOTIFICATION_REGISTRY below
4. Add ``handle_<kind value>`` to each handler named by the entry
"""

from dataclasses import dataclass

from src.domain.enums import NotificationChannel, NotificationKind
from src.domain.events.base_event import DomainEvent
from src.domain.events.notification_events import (
    ResourceShared,
    SessionReminder,
    SessionSummaryPosted,
)


@dataclass(frozen=True)
class NotificationMetadata:
    """Metadata for a notification kind.

    Attributes:
        kind: The notification kind.
        event_class: Payload dataclass for the kind.
        requires_email: EmailNotificationHandler handles this kind.
        requires_in_app: InAppNotificationHandler handles this kind.
    """

    kind: NotificationKind
    event_class: type[DomainEvent]
    requires_email: bool = True
    requires_in_app: bool = True

    @property
    def handler_method(self) -> str:
        """Name of the handler method subscribed for this kind."""
        return f"handle_{self.kind.value}"


NOTIFICATION_REGISTRY: list[NotificationMetadata] = [
    NotificationMetadata(
        kind=NotificationKind.SESSION_REMINDER,
        event_class=SessionReminder,
    ),
    NotificationMetadata(
        kind=NotificationKind.SESSION_SUMMARY_POSTED,
        event_class=SessionSummaryPosted,
    ),
    NotificationMetadata(
        kind=NotificationKind.RESOURCE_SHARED,
        event_class=ResourceShared,
    ),
]


def get_metadata(kind: NotificationKind) -> NotificationMetadata:
    """Registry entry for a kind.

    Raises:
        KeyError: If the kind is not registered.
    """
    for meta in NOTIFICATION_REGISTRY:
        if meta.kind == kind:
            return meta
    raise KeyError(kind)


def get_kinds_for_channel(channel: NotificationChannel) -> list[NotificationKind]:
    """Kinds delivered on a channel.

    Args:
        channel: Delivery channel.

    Returns:
        Kinds whose registry entry requires that channel's handler.
    """
    flag = {
        NotificationChannel.EMAIL: "requires_email",
        NotificationChannel.IN_APP: "requires_in_app",
    }[channel]
    return [meta.kind for meta in NOTIFICATION_REGISTRY if getattr(meta, flag)]
