"""In-memory event bus implementation for notification events.

Dispatches each emission to every handler subscribed for its kind.

Architecture:
    - Implements EventBusProtocol (structural typing)
    - Dictionary-based registry: kind -> ordered list of handlers
    - One task per handler inside an ``asyncio.TaskGroup``
    - Each task wraps its handler and converts a raised ``Exception`` into a
      logged, settled outcome, so the group never cancels siblings

Usage:
    >>> bus = InMemoryEventBus(logger=logger)
    >>> bus.subscribe(NotificationKind.RESOURCE_SHARED, email_handler.handle_resource_shared)
    >>> await bus.emit(NotificationKind.RESOURCE_SHARED, event)
"""

import asyncio
from collections import defaultdict
from typing import Literal, overload

from src.domain.enums import NotificationKind
from src.domain.events import (
    NotificationEvent,
    ResourceShared,
    SessionReminder,
    SessionSummaryPosted,
)
from src.domain.protocols.event_bus_protocol import (
    NotificationHandler,
    ResourceSharedHandler,
    SessionReminderHandler,
    SessionSummaryPostedHandler,
)
from src.domain.protocols.logger_protocol import LoggerProtocol


def _handler_name(handler: NotificationHandler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class InMemoryEventBus:
    """In-memory event bus with per-handler failure isolation.

    Thread Safety:
        - NOT thread-safe (single process, single event loop)

    Attributes:
        _handlers: Mapping of kind to its registered handlers, in
            registration order. Duplicates allowed.
        _logger: Logger for dispatch and handler failures.

    Design Decisions:
        - **Isolation inside the task**: a failing handler settles its own
          task normally; siblings are neither skipped nor cancelled
        - **Await all**: ``emit`` returns after every handler finished, so
          callers (and tests) observe completed deliveries
        - **Snapshot**: the handler list is copied at emit time; subscribing
          during a dispatch affects only later emissions
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[NotificationKind, list[NotificationHandler]] = (
            defaultdict(list)
        )
        self._logger = logger

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

        Args:
            kind: Notification kind to listen for.
            handler: Async callable receiving the kind's payload.
        """
        self._handlers[kind].append(handler)

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
        """Remove the first registration of ``handler`` for ``kind``.

        Removing a handler that was never registered is a no-op.
        """
        handlers = self._handlers.get(kind)
        if not handlers:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            return

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
        """Run every handler for ``kind`` concurrently and wait for all.

        Flow:
            1. Reject a payload of another kind (programming error)
            2. Snapshot handlers; return immediately if there are none
            3. Start one wrapped task per handler in a TaskGroup
            4. Each wrapper logs its handler's exception (warning level)
            5. Return once every task settled (never raises for handlers)

        Raises:
            TypeError: If ``payload.kind`` differs from ``kind``.
        """
        payload_kind = getattr(payload, "kind", None)
        if payload_kind != kind:
            raise TypeError(
                f"Payload {type(payload).__name__} cannot be emitted as {kind.value}"
            )

        handlers = list(self._handlers.get(kind, ()))
        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=kind.value,
            event_id=str(payload.event_id),
            handler_count=len(handlers),
        )

        async with asyncio.TaskGroup() as group:
            for handler in handlers:
                group.create_task(self._run_handler(handler, kind, payload))

    async def publish(self, event: NotificationEvent) -> None:
        """Emit ``event`` under its own kind."""
        await self.emit(event.kind, event)  # type: ignore[call-overload]

    def clear(self) -> None:
        """Drop every subscription."""
        self._handlers.clear()

    def handler_count(self, kind: NotificationKind) -> int:
        return len(self._handlers.get(kind, ()))

    async def _run_handler(
        self,
        handler: NotificationHandler,
        kind: NotificationKind,
        payload: NotificationEvent,
    ) -> None:
        try:
            await handler(payload)
        except Exception as e:
            self._logger.warning(
                "event_handler_failed",
                event_type=kind.value,
                event_id=str(payload.event_id),
                handler_name=_handler_name(handler),
                error_type=type(e).__name__,
                error_message=str(e),
                exc_info=e,
            )
