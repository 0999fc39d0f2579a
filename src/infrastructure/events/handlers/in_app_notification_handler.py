"""In-app delivery handler for notification events.

Creates one Notification row per delivered event. Same flow as the email
handler: resolve the recipient, check the in-app preference, render, store.
Failures are logged at error level and never re-raised.

Usage:
    >>> handler = InAppNotificationHandler(database=get_database(), logger=get_logger())
    >>> bus.subscribe(NotificationKind.SESSION_REMINDER, handler.handle_session_reminder)
"""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.entities import Notification
from src.domain.enums import NotificationChannel, NotificationKind
from src.domain.events import (
    NotificationEvent,
    ResourceShared,
    SessionReminder,
    SessionSummaryPosted,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.events.handlers.in_app_content import (
    InAppContent,
    resource_shared_content,
    session_reminder_content,
    session_summary_posted_content,
)
from src.infrastructure.events.handlers.recipients import (
    is_channel_enabled,
    resolve_coach_name,
    resolve_recipient,
)
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.repositories import NotificationRepository

CHANNEL = NotificationChannel.IN_APP


class InAppNotificationHandler:
    """Stores in-app notifications.

    Attributes:
        _database: Database providing one session per event.
        _logger: Structured logger.
    """

    def __init__(self, database: Database, logger: LoggerProtocol) -> None:
        self._database = database
        self._logger = logger

    async def handle_session_reminder(self, event: SessionReminder) -> None:
        await self._deliver(event, event.coach_name, session_reminder_content)

    async def handle_session_summary_posted(self, event: SessionSummaryPosted) -> None:
        await self._deliver(event, None, session_summary_posted_content)

    async def handle_resource_shared(self, event: ResourceShared) -> None:
        await self._deliver(event, event.coach_name, resource_shared_content)

    async def _deliver(
        self,
        event: NotificationEvent,
        coach_name: str | None,
        render: Callable[[Any, str], InAppContent],
    ) -> None:
        kind: NotificationKind = event.kind
        try:
            async with self._database.get_session() as session:
                recipient = await resolve_recipient(
                    session, event.client_id, logger=self._logger, channel=CHANNEL, kind=kind
                )
                if recipient is None:
                    return
                if not await is_channel_enabled(session, recipient.user.id, CHANNEL, kind):
                    self._logger.debug(
                        "notification_disabled_by_preference",
                        channel=CHANNEL.value,
                        kind=kind.value,
                        user_id=str(recipient.user.id),
                        event_id=str(event.event_id),
                    )
                    return

                name = await resolve_coach_name(
                    session, coach_name, recipient.client.coach_id
                )
                content = render(event, name)
                notification = self._build(recipient.user.id, kind, content)
                await NotificationRepository(session).save(notification)

            self._logger.info(
                "notification_in_app_created",
                kind=kind.value,
                notification_id=str(notification.id),
                user_id=str(notification.user_id),
                event_id=str(event.event_id),
            )
        except Exception as e:
            self._logger.error(
                "notification_in_app_failed",
                error=e,
                kind=kind.value,
                client_id=str(event.client_id),
                event_id=str(event.event_id),
            )

    @staticmethod
    def _build(user_id: UUID, kind: NotificationKind, content: InAppContent) -> Notification:
        return Notification(
            id=uuid7(),
            user_id=user_id,
            kind=kind,
            title=content.title,
            message=content.message,
            created_at=datetime.now(UTC),
            metadata=dict(content.metadata),
        )
