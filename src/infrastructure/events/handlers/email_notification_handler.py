"""Email delivery handler for notification events.

Subscribed by the container for every kind in NOTIFICATION_REGISTRY with
``requires_email``. For each event:

    1. Resolve the recipient user from ``client_id`` (missing: warning, stop)
    2. Check the recipient's email preference for the kind (lazily created,
       all enabled by default)
    3. Load secondary records (session for summaries, resource description)
    4. Render the message
    5. Send it through EmailProtocol, outside the database session

Any exception is logged at error level and swallowed here, so a broken mail
server never reaches the event bus or the producer.

Usage:
    >>> handler = EmailNotificationHandler(
    ...     database=get_database(),
    ...     email_service=get_email_service(),
    ...     logger=get_logger(),
    ...     settings=get_settings(),
    ... )
    >>> bus.subscribe(NotificationKind.RESOURCE_SHARED, handler.handle_resource_shared)
"""

from datetime import UTC
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from src.core.config import Settings
from src.domain.enums import NotificationChannel, NotificationKind
from src.domain.events import (
    NotificationEvent,
    ResourceShared,
    SessionReminder,
    SessionSummaryPosted,
)
from src.domain.protocols.email_protocol import EmailMessage, EmailProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.email.rendering import (
    render_resource_shared,
    render_session_reminder,
    render_session_summary_posted,
)
from src.infrastructure.events.handlers.recipients import (
    is_channel_enabled,
    resolve_coach_name,
    resolve_recipient,
)
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.repositories import (
    CoachSessionRepository,
    ResourceRepository,
)

CHANNEL = NotificationChannel.EMAIL


class EmailNotificationHandler:
    """Sends notification emails.

    Attributes:
        _database: Database providing one session per event.
        _email: Email transport.
        _logger: Structured logger.
        _settings: Settings (web client base URL, product name).
    """

    def __init__(
        self,
        database: Database,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
        settings: Settings,
    ) -> None:
        self._database = database
        self._email = email_service
        self._logger = logger
        self._settings = settings

    async def handle_session_reminder(self, event: SessionReminder) -> None:
        """Email the client about tomorrow's session.

        The time is shown in the client's schedule timezone; without a
        usable timezone only the (UTC) date is shown.
        """
        kind = NotificationKind.SESSION_REMINDER
        try:
            async with self._database.get_session() as session:
                recipient = await resolve_recipient(
                    session, event.client_id, logger=self._logger, channel=CHANNEL, kind=kind
                )
                if recipient is None or not self._has_address(recipient.user.email, event, kind):
                    return
                if not await is_channel_enabled(session, recipient.user.id, CHANNEL, kind):
                    self._log_opted_out(recipient.user.id, event, kind)
                    return

                coach_name = await resolve_coach_name(
                    session, event.coach_name, recipient.client.coach_id
                )

            zone = self._zone(recipient.client.schedule_timezone)
            session_start = event.session_date.astimezone(zone or UTC)
            message = render_session_reminder(
                to=recipient.user.email,
                client_name=recipient.user.greeting_name,
                coach_name=coach_name,
                session_start=session_start,
                include_time=zone is not None,
                app_url=f"{self._settings.app_base_url}/client/sessions",
                app_name=self._settings.app_name,
            )
            await self._send(message, event, kind)
        except Exception as e:
            self._log_failure(e, event, kind)

    async def handle_session_summary_posted(self, event: SessionSummaryPosted) -> None:
        """Email the client that a session summary was posted.

        Skipped with a warning if the session record no longer exists.
        """
        kind = NotificationKind.SESSION_SUMMARY_POSTED
        try:
            async with self._database.get_session() as session:
                recipient = await resolve_recipient(
                    session, event.client_id, logger=self._logger, channel=CHANNEL, kind=kind
                )
                if recipient is None or not self._has_address(recipient.user.email, event, kind):
                    return
                if not await is_channel_enabled(session, recipient.user.id, CHANNEL, kind):
                    self._log_opted_out(recipient.user.id, event, kind)
                    return

                coach_session = await CoachSessionRepository(session).find_by_id(
                    event.session_id
                )
                if coach_session is None:
                    self._logger.warning(
                        "notification_session_missing",
                        channel=CHANNEL.value,
                        session_id=str(event.session_id),
                        event_id=str(event.event_id),
                    )
                    return

                coach_name = await resolve_coach_name(
                    session, None, recipient.client.coach_id
                )

            zone = self._zone(recipient.client.schedule_timezone) or UTC
            message = render_session_summary_posted(
                to=recipient.user.email,
                client_name=recipient.user.greeting_name,
                coach_name=coach_name,
                session_date=coach_session.session_date.astimezone(zone),
                summary=event.shared_summary,
                topic=event.topic or coach_session.topic,
                app_url=f"{self._settings.app_base_url}/client/sessions",
                app_name=self._settings.app_name,
            )
            await self._send(message, event, kind)
        except Exception as e:
            self._log_failure(e, event, kind)

    async def handle_resource_shared(self, event: ResourceShared) -> None:
        """Email the client about a newly shared resource."""
        kind = NotificationKind.RESOURCE_SHARED
        try:
            async with self._database.get_session() as session:
                recipient = await resolve_recipient(
                    session, event.client_id, logger=self._logger, channel=CHANNEL, kind=kind
                )
                if recipient is None or not self._has_address(recipient.user.email, event, kind):
                    return
                if not await is_channel_enabled(session, recipient.user.id, CHANNEL, kind):
                    self._log_opted_out(recipient.user.id, event, kind)
                    return

                resource = await ResourceRepository(session).find_by_id(event.resource_id)
                if resource is None:
                    # Still sent, without the description
                    self._logger.warning(
                        "notification_resource_missing",
                        channel=CHANNEL.value,
                        resource_id=str(event.resource_id),
                        event_id=str(event.event_id),
                    )
                coach_name = await resolve_coach_name(
                    session, event.coach_name, recipient.client.coach_id
                )

            message = render_resource_shared(
                to=recipient.user.email,
                client_name=recipient.user.greeting_name,
                coach_name=coach_name,
                resource_name=event.resource_name,
                resource_description=resource.description if resource else None,
                app_url=f"{self._settings.app_base_url}/client/resources",
                app_name=self._settings.app_name,
            )
            await self._send(message, event, kind)
        except Exception as e:
            self._log_failure(e, event, kind)

    async def _send(
        self,
        message: EmailMessage,
        event: NotificationEvent,
        kind: NotificationKind,
    ) -> None:
        await self._email.send(message)
        self._logger.info(
            "notification_email_sent",
            kind=kind.value,
            client_id=str(event.client_id),
            event_id=str(event.event_id),
        )

    def _has_address(
        self,
        email: str,
        event: NotificationEvent,
        kind: NotificationKind,
    ) -> bool:
        if email:
            return True
        self._logger.warning(
            "notification_recipient_missing",
            channel=CHANNEL.value,
            kind=kind.value,
            client_id=str(event.client_id),
            reason="no_email",
        )
        return False

    def _zone(self, timezone: str | None) -> ZoneInfo | None:
        if not timezone:
            return None
        try:
            return ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError):
            self._logger.warning("notification_timezone_invalid", timezone=timezone)
            return None

    def _log_opted_out(
        self,
        user_id: UUID,
        event: NotificationEvent,
        kind: NotificationKind,
    ) -> None:
        self._logger.debug(
            "notification_disabled_by_preference",
            channel=CHANNEL.value,
            kind=kind.value,
            user_id=str(user_id),
            event_id=str(event.event_id),
        )

    def _log_failure(
        self,
        error: Exception,
        event: NotificationEvent,
        kind: NotificationKind,
    ) -> None:
        self._logger.error(
            "notification_email_failed",
            error=error,
            kind=kind.value,
            client_id=str(event.client_id),
            event_id=str(event.event_id),
        )
