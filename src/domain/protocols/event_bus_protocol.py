"""Event bus protocol (port) for notification events.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - InMemoryEventBus (src/infrastructure/events/in_memory_event_bus.py)
      is the only adapter; the container builds one per process

Usage:
    >>> from src.core.container import get_event_bus
    >>> bus = get_event_bus()
    >>> await bus.emit(
    ...     NotificationKind.RESOURCE_SHARED,
    ...     ResourceShared(client_id=..., resource_id=..., resource_name="Plan.pdf"),
    ... )
"""

from collections.abc import Awaitable, Callable
from typing import Any, Literal, Protocol, overload

from src.domain.enums import NotificationKind
from src.domain.events import (
    NotificationEvent,
    ResourceShared,
    SessionReminder,
    SessionSummaryPosted,
)

# Type alias for notification handler functions
NotificationHandler = Callable[[Any], Awaitable[None]]
"""Async callable receiving the payload of the kind it subscribed to.

Handlers return None and may raise; the bus logs the failure and keeps
running the other handlers.
"""

SessionReminderHandler = Callable[[SessionReminder], Awaitable[None]]
SessionSummaryPostedHandler = Callable[[SessionSummaryPosted], Awaitable[None]]
ResourceSharedHandler = Callable[[ResourceShared], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Failure isolation**: one handler raising must not prevent or
           cancel the others, and must not surface to the emitter.
        2. **Concurrent dispatch**: all handlers for a kind run concurrently;
           no ordering guarantee between them.
        3. **Completion**: ``emit`` returns only after every handler settled.
        4. **Kind safety**: a payload is only delivered to handlers of its
           own kind. The overloads tie each kind to its payload type for
           ``subscribe``, ``unsubscribe`` and ``emit`` alike.
    """

    @overload
    def subscribe(
        self,
        kind: Literal[NotificationKind.SESSION_REMINDER],
        handler: SessionReminderHandler,
    ) -> None: ...

    @overload
    def subscribe(
        self,
        kind: Literal[NotificationKind.SESSION_SUMMARY_POSTED],
        handler: SessionSummaryPostedHandler,
    ) -> None: ...

    @overload
    def subscribe(
        self,
        kind: Literal[NotificationKind.RESOURCE_SHARED],
        handler: ResourceSharedHandler,
    ) -> None: ...

    def subscribe(self, kind: NotificationKind, handler: NotificationHandler) -> None:
        """Register a handler for a kind.

        Registering the same handler twice registers it twice; it then runs
        twice per emission.
        """
        ...

    @overload
    def unsubscribe(
        self,
        kind: Literal[NotificationKind.SESSION_REMINDER],
        handler: SessionReminderHandler,
    ) -> None: ...

    @overload
    def unsubscribe(
        self,
        kind: Literal[NotificationKind.SESSION_SUMMARY_POSTED],
        handler: SessionSummaryPostedHandler,
    ) -> None: ...

    @overload
    def unsubscribe(
        self,
        kind: Literal[NotificationKind.RESOURCE_SHARED],
        handler: ResourceSharedHandler,
    ) -> None: ...

    def unsubscribe(
        self, kind: NotificationKind, handler: NotificationHandler
    ) -> None:
        """Remove one registration of a handler. Unknown handlers are ignored."""
        ...

    @overload
    async def emit(
        self,
        kind: Literal[NotificationKind.SESSION_REMINDER],
        payload: SessionReminder,
    ) -> None: ...

    @overload
    async def emit(
        self,
        kind: Literal[NotificationKind.SESSION_SUMMARY_POSTED],
        payload: SessionSummaryPosted,
    ) -> None: ...

    @overload
    async def emit(
        self,
        kind: Literal[NotificationKind.RESOURCE_SHARED],
        payload: ResourceShared,
    ) -> None: ...

    async def emit(self, kind: NotificationKind, payload: NotificationEvent) -> None:
        """Run every handler registered for ``kind`` and wait for all of them.

        Never raises because of a handler failure. With no handlers
        registered this is a no-op.

        Raises:
            TypeError: If ``payload`` is not the payload type of ``kind``.
        """
        ...

    async def publish(self, event: NotificationEvent) -> None:
        """Emit an event under its own kind."""
        ...

    def clear(self) -> None:
        """Drop every subscription (test isolation)."""
        ...

    def handler_count(self, kind: NotificationKind) -> int:
        """Number of registrations for ``kind``."""
        ...
