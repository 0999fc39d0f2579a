"""Application handler factories.

Each factory builds one command/query handler around an open AsyncSession,
wiring SQLAlchemy repositories (implementing the domain protocols), the
event bus and the logger.

Usage:
    async with get_db_session() as session:
        handler = get_set_client_schedule_handler(session)
        result = await handler.handle(SetClientSchedule(...))
"""

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import get_settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from src.application.commands.handlers import (
        CreateResourceHandler,
        LogSessionHandler,
        MarkAllNotificationsReadHandler,
        MarkNotificationReadHandler,
        SetClientScheduleHandler,
        UpdateNotificationPreferencesHandler,
    )
    from src.application.jobs import SessionReminderJob
    from src.application.queries.handlers import (
        CountUnreadNotificationsHandler,
        GetNotificationPreferencesHandler,
        ListNotificationsHandler,
    )


# ============================================================================
# Coaching Operations (notification producers)
# ============================================================================


def get_set_client_schedule_handler(session: AsyncSession) -> "SetClientScheduleHandler":
    from src.application.commands.handlers import SetClientScheduleHandler
    from src.infrastructure.persistence.repositories import ClientProfileRepository

    return SetClientScheduleHandler(
        client_repo=ClientProfileRepository(session=session),
        logger=get_logger(),
    )


def get_log_session_handler(session: AsyncSession) -> "LogSessionHandler":
    """Get LogSession command handler.

    Emits SessionSummaryPosted through the app-scoped event bus.
    """
    from src.application.commands.handlers import LogSessionHandler
    from src.infrastructure.persistence.repositories import (
        ClientProfileRepository,
        CoachSessionRepository,
    )

    return LogSessionHandler(
        client_repo=ClientProfileRepository(session=session),
        session_repo=CoachSessionRepository(session=session),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


def get_create_resource_handler(session: AsyncSession) -> "CreateResourceHandler":
    """Get CreateResource command handler.

    Emits ResourceShared for each active client through the app-scoped bus.
    """
    from src.application.commands.handlers import CreateResourceHandler
    from src.infrastructure.persistence.repositories import (
        ClientProfileRepository,
        CoachProfileRepository,
        ResourceRepository,
    )

    return CreateResourceHandler(
        resource_repo=ResourceRepository(session=session),
        client_repo=ClientProfileRepository(session=session),
        coach_repo=CoachProfileRepository(session=session),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


def get_session_reminder_job(session: AsyncSession) -> "SessionReminderJob":
    """Get the reminder scan job, windowed by REMINDER_* settings."""
    from src.application.jobs import SessionReminderJob
    from src.infrastructure.persistence.repositories import (
        ClientProfileRepository,
        CoachProfileRepository,
    )

    settings = get_settings()
    return SessionReminderJob(
        client_repo=ClientProfileRepository(session=session),
        coach_repo=CoachProfileRepository(session=session),
        event_bus=get_event_bus(),
        logger=get_logger(),
        lookahead_hours=settings.reminder_lookahead_hours,
        window_hours=settings.reminder_window_hours,
    )


# ============================================================================
# Notification Center (queries and read-state commands)
# ============================================================================


def get_list_notifications_handler(session: AsyncSession) -> "ListNotificationsHandler":
    from src.application.queries.handlers import ListNotificationsHandler
    from src.infrastructure.persistence.repositories import NotificationRepository

    return ListNotificationsHandler(
        notification_repo=NotificationRepository(session=session)
    )


def get_count_unread_notifications_handler(
    session: AsyncSession,
) -> "CountUnreadNotificationsHandler":
    from src.application.queries.handlers import CountUnreadNotificationsHandler
    from src.infrastructure.persistence.repositories import NotificationRepository

    return CountUnreadNotificationsHandler(
        notification_repo=NotificationRepository(session=session)
    )


def get_mark_notification_read_handler(
    session: AsyncSession,
) -> "MarkNotificationReadHandler":
    from src.application.commands.handlers import MarkNotificationReadHandler
    from src.infrastructure.persistence.repositories import NotificationRepository

    return MarkNotificationReadHandler(
        notification_repo=NotificationRepository(session=session)
    )


def get_mark_all_notifications_read_handler(
    session: AsyncSession,
) -> "MarkAllNotificationsReadHandler":
    from src.application.commands.handlers import MarkAllNotificationsReadHandler
    from src.infrastructure.persistence.repositories import NotificationRepository

    return MarkAllNotificationsReadHandler(
        notification_repo=NotificationRepository(session=session)
    )


def get_get_notification_preferences_handler(
    session: AsyncSession,
) -> "GetNotificationPreferencesHandler":
    from src.application.queries.handlers import GetNotificationPreferencesHandler
    from src.infrastructure.persistence.repositories import (
        NotificationPreferencesRepository,
    )

    return GetNotificationPreferencesHandler(
        preferences_repo=NotificationPreferencesRepository(session=session)
    )


def get_update_notification_preferences_handler(
    session: AsyncSession,
) -> "UpdateNotificationPreferencesHandler":
    from src.application.commands.handlers import UpdateNotificationPreferencesHandler
    from src.infrastructure.persistence.repositories import (
        NotificationPreferencesRepository,
    )

    return UpdateNotificationPreferencesHandler(
        preferences_repo=NotificationPreferencesRepository(session=session),
        logger=get_logger(),
    )
