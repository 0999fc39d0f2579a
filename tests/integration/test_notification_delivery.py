"""Integration tests for email and in-app delivery handlers.

Handlers open their own sessions on the test database, exactly as they do
when subscribed on the event bus. Emails go to StubEmailService, which
records every message.

Tests cover:
- Both channels deliver and create default preferences on first use
- Per-channel opt-out
- Clients without a linked user, and soft-deleted clients, are skipped
- Summary email skipped when the session row is gone
- Resource email still sent when the resource row is gone
- Transport and save failures are logged and never reach the bus
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from sqlalchemy.exc import OperationalError
from uuid_extensions import uuid7

from src.core.config import Settings
from src.domain.entities import CoachSession, Resource
from src.domain.enums import NotificationKind
from src.domain.events import (
    NOTIFICATION_REGISTRY,
    ResourceShared,
    SessionReminder,
    SessionSummaryPosted,
)
from src.infrastructure.email import StubEmailService
from src.infrastructure.events.handlers import (
    EmailNotificationHandler,
    InAppNotificationHandler,
)
from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus
from src.infrastructure.persistence.repositories import (
    CoachSessionRepository,
    NotificationPreferencesRepository,
    NotificationRepository,
    ResourceRepository,
)
from tests.conftest import create_client_in_db, create_coach_in_db, create_user_in_db

SESSION_START = datetime(2024, 3, 12, 18, 0, tzinfo=UTC)


@pytest.fixture
def email_service(mock_logger):
    return StubEmailService(logger=mock_logger)


@pytest.fixture
def failing_email_service():
    """Transport whose send fails like an unreachable SMTP server."""
    service = AsyncMock()
    service.send.side_effect = OSError("Connection refused")
    return service


@pytest.fixture
def handlers(test_database, email_service, mock_logger):
    settings = Settings(app_base_url="https://app.loom.example.com")
    return (
        EmailNotificationHandler(
            database=test_database,
            email_service=email_service,
            logger=mock_logger,
            settings=settings,
        ),
        InAppNotificationHandler(database=test_database, logger=mock_logger),
    )


@pytest_asyncio.fixture
async def registered_client(test_database):
    """Coach, client user and linked client profile. Returns ids."""
    async with test_database.get_session() as session:
        coach_id = await create_coach_in_db(session)
        user_id = await create_user_in_db(session, email="sam@example.com")
        client_id = await create_client_in_db(
            session,
            coach_id,
            user_id=user_id,
            schedule_day=2,
            schedule_time="14:00",
            schedule_timezone="America/New_York",
        )
    return coach_id, user_id, client_id


async def list_notifications(database, user_id):
    async with database.get_session() as session:
        notifications, _ = await NotificationRepository(session).list_for_user(
            user_id, limit=100, offset=0
        )
    return notifications


def wire_bus(logger, *channel_handlers):
    """Bus with every registered kind routed to each channel handler."""
    bus = InMemoryEventBus(logger=logger)
    for metadata in NOTIFICATION_REGISTRY:
        for channel_handler in channel_handlers:
            bus.subscribe(metadata.kind, getattr(channel_handler, metadata.handler_method))
    return bus


@pytest.mark.integration
class TestDelivery:
    @pytest.mark.asyncio
    async def test_both_channels_deliver_with_default_preferences(
        self, test_database, handlers, email_service, registered_client
    ):
        email_handler, in_app_handler = handlers
        _, user_id, client_id = registered_client
        event = SessionReminder(
            client_id=client_id, session_date=SESSION_START, coach_name="jane.doe"
        )

        await email_handler.handle_session_reminder(event)
        await in_app_handler.handle_session_reminder(event)

        assert len(email_service.sent) == 1
        message = email_service.sent[0]
        assert message.to == "sam@example.com"
        assert message.subject == "Reminder: Your session with jane.doe is tomorrow"
        # 18:00 UTC in New York during DST
        assert "2:00 PM EDT" in message.text

        notifications = await list_notifications(test_database, user_id)
        assert len(notifications) == 1
        assert notifications[0].title == "Upcoming Session"
        assert notifications[0].read is False

        async with test_database.get_session() as session:
            preferences = await NotificationPreferencesRepository(
                session
            ).find_by_user_id(user_id)
        assert preferences is not None

    @pytest.mark.asyncio
    async def test_email_opt_out_keeps_in_app(
        self, test_database, handlers, email_service, mock_logger, registered_client
    ):
        _, user_id, client_id = registered_client
        async with test_database.get_session() as session:
            repo = NotificationPreferencesRepository(session)
            preferences = await repo.get_or_create(user_id)
            preferences.apply({"email_session_reminders": False})
            await repo.update(preferences)
        bus = wire_bus(mock_logger, *handlers)

        await bus.emit(
            NotificationKind.SESSION_REMINDER,
            SessionReminder(client_id=client_id, session_date=SESSION_START),
        )

        assert email_service.sent == []
        assert [n.title for n in await list_notifications(test_database, user_id)] == [
            "Upcoming Session"
        ]
        events = [c.args[0] for c in mock_logger.debug.call_args_list]
        assert "notification_disabled_by_preference" in events

    @pytest.mark.asyncio
    async def test_soft_deleted_client_is_skipped(
        self, test_database, handlers, email_service, mock_logger
    ):
        async with test_database.get_session() as session:
            coach_id = await create_coach_in_db(session)
            user_id = await create_user_in_db(session)
            client_id = await create_client_in_db(
                session, coach_id, user_id=user_id, deleted_at=SESSION_START
            )
        bus = wire_bus(mock_logger, *handlers)

        await bus.emit(
            NotificationKind.SESSION_REMINDER,
            SessionReminder(client_id=client_id, session_date=SESSION_START),
        )

        assert email_service.sent == []
        assert await list_notifications(test_database, user_id) == []
        reasons = [
            c.kwargs["reason"]
            for c in mock_logger.warning.call_args_list
            if c.args[0] == "notification_recipient_missing"
        ]
        assert reasons == ["client_deleted", "client_deleted"]

    @pytest.mark.asyncio
    async def test_client_without_user_is_skipped(
        self, test_database, handlers, email_service, mock_logger
    ):
        email_handler, in_app_handler = handlers
        async with test_database.get_session() as session:
            coach_id = await create_coach_in_db(session)
            client_id = await create_client_in_db(session, coach_id, client_type="offline")
        event = ResourceShared(
            client_id=client_id, resource_id=uuid7(), resource_name="Values worksheet"
        )

        await email_handler.handle_resource_shared(event)
        await in_app_handler.handle_resource_shared(event)

        assert email_service.sent == []
        warnings = [c for c in mock_logger.warning.call_args_list]
        assert len(warnings) == 2
        assert all(c.args[0] == "notification_recipient_missing" for c in warnings)
        assert all(c.kwargs["reason"] == "no_linked_user" for c in warnings)

    @pytest.mark.asyncio
    async def test_summary_email_skipped_without_session_row(
        self, test_database, handlers, email_service, mock_logger, registered_client
    ):
        email_handler, in_app_handler = handlers
        _, user_id, client_id = registered_client
        event = SessionSummaryPosted(
            client_id=client_id,
            session_id=uuid7(),
            shared_summary="Great progress on boundaries.",
        )

        await email_handler.handle_session_summary_posted(event)
        await in_app_handler.handle_session_summary_posted(event)

        assert email_service.sent == []
        assert mock_logger.warning.call_args.args[0] == "notification_session_missing"
        # In-app needs no session details
        notifications = await list_notifications(test_database, user_id)
        assert [n.title for n in notifications] == ["Session Summary"]

    @pytest.mark.asyncio
    async def test_summary_email_uses_stored_session(
        self, test_database, handlers, email_service, registered_client
    ):
        email_handler, _ = handlers
        coach_id, _, client_id = registered_client
        coach_session = CoachSession(
            id=uuid7(),
            client_id=client_id,
            coach_id=coach_id,
            session_number=1,
            session_date=SESSION_START - timedelta(days=7),
            topic="Boundaries",
        )
        async with test_database.get_session() as session:
            await CoachSessionRepository(session).save(coach_session)
        event = SessionSummaryPosted(
            client_id=client_id,
            session_id=coach_session.id,
            shared_summary="Great progress on boundaries.",
        )

        await email_handler.handle_session_summary_posted(event)

        assert len(email_service.sent) == 1
        message = email_service.sent[0]
        assert message.subject == "jane.doe posted your session summary"
        assert "Great progress on boundaries." in message.html
        assert "Boundaries" in message.html

    @pytest.mark.asyncio
    async def test_resource_email_includes_description(
        self, test_database, handlers, email_service, registered_client
    ):
        email_handler, _ = handlers
        coach_id, _, client_id = registered_client
        resource = Resource(
            id=uuid7(),
            coach_id=coach_id,
            name="Values worksheet",
            file_type="application/pdf",
            description="Fill in before our next call",
            created_at=datetime.now(UTC),
        )
        async with test_database.get_session() as session:
            await ResourceRepository(session).save(resource)

        await email_handler.handle_resource_shared(
            ResourceShared(
                client_id=client_id,
                resource_id=resource.id,
                resource_name=resource.name,
            )
        )

        message = email_service.sent[0]
        assert message.subject == "jane.doe shared a new resource with you"
        assert "Fill in before our next call" in message.html
        assert message.html.count("https://app.loom.example.com/client/resources") >= 1

    @pytest.mark.asyncio
    async def test_resource_email_sent_when_resource_row_is_gone(
        self, test_database, handlers, email_service, mock_logger, registered_client
    ):
        email_handler, _ = handlers
        _, _, client_id = registered_client
        event = ResourceShared(
            client_id=client_id, resource_id=uuid7(), resource_name="Values worksheet"
        )

        await email_handler.handle_resource_shared(event)

        assert len(email_service.sent) == 1
        assert "Values worksheet" in email_service.sent[0].html
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.args[0] == "notification_resource_missing"
        assert mock_logger.warning.call_args.kwargs["resource_id"] == str(event.resource_id)


@pytest.mark.integration
class TestDeliveryFailures:
    @pytest.mark.asyncio
    async def test_email_transport_error_is_logged_and_swallowed(
        self, test_database, failing_email_service, mock_logger, registered_client
    ):
        _, _, client_id = registered_client
        email_handler = EmailNotificationHandler(
            database=test_database,
            email_service=failing_email_service,
            logger=mock_logger,
            settings=Settings(),
        )
        event = SessionReminder(client_id=client_id, session_date=SESSION_START)

        await email_handler.handle_session_reminder(event)

        failing_email_service.send.assert_awaited_once()
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.args[0] == "notification_email_failed"
        assert isinstance(mock_logger.error.call_args.kwargs["error"], OSError)
        assert mock_logger.error.call_args.kwargs["event_id"] == str(event.event_id)
        sent = [c.args[0] for c in mock_logger.info.call_args_list]
        assert "notification_email_sent" not in sent

    @pytest.mark.asyncio
    async def test_in_app_save_error_is_logged_and_swallowed(
        self, test_database, handlers, mock_logger, registered_client
    ):
        _, in_app_handler = handlers
        _, user_id, client_id = registered_client
        event = ResourceShared(
            client_id=client_id, resource_id=uuid7(), resource_name="Values worksheet"
        )
        save = AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("locked")))

        with patch.object(NotificationRepository, "save", save):
            await in_app_handler.handle_resource_shared(event)

        save.assert_awaited_once()
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.args[0] == "notification_in_app_failed"
        assert isinstance(mock_logger.error.call_args.kwargs["error"], OperationalError)
        assert await list_notifications(test_database, user_id) == []

    @pytest.mark.asyncio
    async def test_email_transport_error_does_not_block_in_app_sibling(
        self, test_database, failing_email_service, mock_logger, registered_client
    ):
        _, user_id, client_id = registered_client
        email_handler = EmailNotificationHandler(
            database=test_database,
            email_service=failing_email_service,
            logger=mock_logger,
            settings=Settings(),
        )
        in_app_handler = InAppNotificationHandler(database=test_database, logger=mock_logger)
        bus = wire_bus(mock_logger, email_handler, in_app_handler)

        await bus.emit(
            NotificationKind.SESSION_REMINDER,
            SessionReminder(client_id=client_id, session_date=SESSION_START),
        )

        failing_email_service.send.assert_awaited_once()
        assert [n.title for n in await list_notifications(test_database, user_id)] == [
            "Upcoming Session"
        ]
        assert mock_logger.error.call_args.args[0] == "notification_email_failed"
        # The handler settled its own failure; the bus saw none
        warnings = [c.args[0] for c in mock_logger.warning.call_args_list]
        assert "event_handler_failed" not in warnings
