"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: In-process bus with per-handler failure isolation

Event Handlers (handlers/):
    - EmailNotificationHandler: Email delivery
    - InAppNotificationHandler: In-app notification rows

Usage:
    >>> from src.infrastructure.events import InMemoryEventBus
    >>> bus = InMemoryEventBus(logger=logger)
    >>> bus.subscribe(NotificationKind.SESSION_REMINDER, in_app.handle_session_reminder)
"""

from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
]
