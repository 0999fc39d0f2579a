"""Unit tests for the coaching operations that produce notifications.

Tests cover:
- SetClientScheduleHandler: ownership, validation, next session stored
- LogSessionHandler: numbering, single-write bookkeeping, SessionSummaryPosted
- CreateResourceHandler: validation, fan-out to every active client,
  per-client failure isolation

Architecture:
- Unit tests for application handlers (mocked dependencies)
- Mock repository and event bus protocols with AsyncMock
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.application.commands import CreateResource, LogSession, SetClientSchedule
from src.application.commands.handlers import (
    CreateResourceHandler,
    LogSessionHandler,
    SetClientScheduleHandler,
)
from src.application.errors import ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.entities import ClientProfile, CoachProfile, CoachSession
from src.domain.enums import NotificationKind
from src.domain.events import ResourceShared, SessionSummaryPosted


def create_client(coach_id=None, **overrides) -> ClientProfile:
    return ClientProfile(
        id=overrides.pop("id", uuid7()),
        coach_id=coach_id or uuid7(),
        user_id=overrides.pop("user_id", uuid7()),
        **overrides,
    )


@pytest.mark.unit
class TestSetClientScheduleHandler:
    """Test setting a client's weekly schedule."""

    @pytest.mark.asyncio
    @freeze_time("2024-03-11 14:00:00")
    async def test_stores_schedule_and_next_session(self):
        # Arrange
        coach_id = uuid7()
        client = create_client(coach_id=coach_id)
        client_repo = AsyncMock()
        client_repo.find_by_id.return_value = client
        handler = SetClientScheduleHandler(client_repo=client_repo, logger=MagicMock())

        # Act
        result = await handler.handle(
            SetClientSchedule(
                coach_id=coach_id,
                client_id=client.id,
                day=1,
                time="14:00",
                timezone="America/New_York",
            )
        )

        # Assert
        expected = datetime(2024, 3, 18, 18, 0, tzinfo=UTC)
        assert isinstance(result, Success)
        assert result.value == expected
        client_repo.update_schedule.assert_awaited_once_with(
            client.id,
            day=1,
            time="14:00",
            timezone="America/New_York",
            next_session_date=expected,
        )

    @pytest.mark.asyncio
    async def test_unknown_client(self):
        client_repo = AsyncMock()
        client_repo.find_by_id.return_value = None
        handler = SetClientScheduleHandler(client_repo=client_repo, logger=MagicMock())

        result = await handler.handle(
            SetClientSchedule(
                coach_id=uuid7(), client_id=uuid7(), day=1, time="10:00", timezone="UTC"
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        client_repo.update_schedule.assert_not_called()

    @pytest.mark.asyncio
    async def test_other_coaches_client(self):
        client = create_client()
        client_repo = AsyncMock()
        client_repo.find_by_id.return_value = client
        handler = SetClientScheduleHandler(client_repo=client_repo, logger=MagicMock())

        result = await handler.handle(
            SetClientSchedule(
                coach_id=uuid7(), client_id=client.id, day=1, time="10:00", timezone="UTC"
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN
        client_repo.update_schedule.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("day", "time", "timezone", "field"),
        [
            (7, "10:00", "UTC", "day"),
            (1, "25:00", "UTC", "time"),
            (1, "10:00", "Nowhere/Special", "timezone"),
        ],
    )
    async def test_invalid_schedule_is_validation_failure(self, day, time, timezone, field):
        coach_id = uuid7()
        client = create_client(coach_id=coach_id)
        client_repo = AsyncMock()
        client_repo.find_by_id.return_value = client
        handler = SetClientScheduleHandler(client_repo=client_repo, logger=MagicMock())

        result = await handler.handle(
            SetClientSchedule(
                coach_id=coach_id,
                client_id=client.id,
                day=day,
                time=time,
                timezone=timezone,
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.domain_error.code == ErrorCode.INVALID_SCHEDULE
        assert result.error.domain_error.field == field
        client_repo.update_schedule.assert_not_called()


@pytest.mark.unit
class TestLogSessionHandler:
    """Test logging a coaching session."""

    def _handler(self, client, event_bus=None, logger=None, next_number=3):
        client_repo = AsyncMock()
        client_repo.find_by_id.return_value = client
        session_repo = AsyncMock()
        session_repo.next_session_number.return_value = next_number
        handler = LogSessionHandler(
            client_repo=client_repo,
            session_repo=session_repo,
            event_bus=event_bus or AsyncMock(),
            logger=logger or MagicMock(),
        )
        return handler, client_repo, session_repo

    @pytest.mark.asyncio
    @freeze_time("2024-03-11 14:00:00")
    async def test_logs_session_and_advances_schedule(self):
        # Arrange
        coach_id = uuid7()
        client = create_client(
            coach_id=coach_id,
            schedule_day=1,
            schedule_time="14:00",
            schedule_timezone="America/New_York",
        )
        event_bus = AsyncMock()
        handler, client_repo, session_repo = self._handler(client, event_bus=event_bus)

        # Act
        result = await handler.handle(
            LogSession(
                coach_id=coach_id,
                client_id=client.id,
                session_date=datetime(2024, 3, 11, 13, 0, tzinfo=UTC),
                topic="Boundaries",
            )
        )

        # Assert
        assert isinstance(result, Success)
        session = result.value
        assert isinstance(session, CoachSession)
        assert session.session_number == 3
        session_repo.save.assert_awaited_once_with(session)
        client_repo.record_session_logged.assert_awaited_once_with(
            client.id,
            next_session_date=datetime(2024, 3, 18, 18, 0, tzinfo=UTC),
            logged_at=datetime(2024, 3, 11, 14, 0, tzinfo=UTC),
        )
        event_bus.emit.assert_not_called()

    @pytest.mark.asyncio
    async def test_client_without_schedule_keeps_next_session(self):
        coach_id = uuid7()
        client = create_client(coach_id=coach_id)
        handler, client_repo, _ = self._handler(client)

        await handler.handle(
            LogSession(
                coach_id=coach_id,
                client_id=client.id,
                session_date=datetime.now(UTC),
            )
        )

        kwargs = client_repo.record_session_logged.call_args.kwargs
        assert kwargs["next_session_date"] is None

    @pytest.mark.asyncio
    async def test_shared_summary_emits_event(self):
        coach_id = uuid7()
        client = create_client(coach_id=coach_id)
        event_bus = AsyncMock()
        handler, _, _ = self._handler(client, event_bus=event_bus)

        result = await handler.handle(
            LogSession(
                coach_id=coach_id,
                client_id=client.id,
                session_date=datetime.now(UTC),
                topic="Values",
                shared_summary="We clarified your top three values.",
            )
        )

        event_bus.emit.assert_awaited_once()
        kind, payload = event_bus.emit.call_args.args
        assert kind == NotificationKind.SESSION_SUMMARY_POSTED
        assert isinstance(payload, SessionSummaryPosted)
        assert payload.client_id == client.id
        assert payload.session_id == result.value.id
        assert payload.topic == "Values"
        assert payload.shared_summary == "We clarified your top three values."

    @pytest.mark.asyncio
    async def test_blank_summary_does_not_emit(self):
        coach_id = uuid7()
        client = create_client(coach_id=coach_id)
        event_bus = AsyncMock()
        handler, _, _ = self._handler(client, event_bus=event_bus)

        await handler.handle(
            LogSession(
                coach_id=coach_id,
                client_id=client.id,
                session_date=datetime.now(UTC),
                shared_summary="   ",
            )
        )

        event_bus.emit.assert_not_called()

    @pytest.mark.asyncio
    async def test_emit_failure_does_not_fail_the_operation(self):
        coach_id = uuid7()
        client = create_client(coach_id=coach_id)
        event_bus = AsyncMock()
        event_bus.emit.side_effect = RuntimeError("bus down")
        mock_logger = MagicMock()
        handler, client_repo, _ = self._handler(
            client, event_bus=event_bus, logger=mock_logger
        )

        result = await handler.handle(
            LogSession(
                coach_id=coach_id,
                client_id=client.id,
                session_date=datetime.now(UTC),
                shared_summary="Summary",
            )
        )

        assert isinstance(result, Success)
        client_repo.record_session_logged.assert_awaited_once()
        assert mock_logger.error.call_args.args[0] == "notification_emit_failed"

    @pytest.mark.asyncio
    async def test_other_coaches_client_rejected(self):
        client = create_client()
        handler, client_repo, session_repo = self._handler(client)

        result = await handler.handle(
            LogSession(
                coach_id=uuid7(), client_id=client.id, session_date=datetime.now(UTC)
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN
        session_repo.save.assert_not_called()
        client_repo.record_session_logged.assert_not_called()


@pytest.mark.unit
class TestCreateResourceHandler:
    """Test resource creation and its fan-out."""

    def _handler(self, coach, clients, event_bus=None, logger=None):
        resource_repo = AsyncMock()
        client_repo = AsyncMock()
        client_repo.list_active_by_coach.return_value = clients
        coach_repo = AsyncMock()
        coach_repo.find_by_id.return_value = coach
        handler = CreateResourceHandler(
            resource_repo=resource_repo,
            client_repo=client_repo,
            coach_repo=coach_repo,
            event_bus=event_bus or AsyncMock(),
            logger=logger or MagicMock(),
        )
        return handler, resource_repo, client_repo

    @pytest.mark.asyncio
    async def test_emits_once_per_active_client(self):
        # Arrange
        coach = CoachProfile(id=uuid7(), user_id=uuid7(), email="jane@example.com")
        clients = [create_client(coach_id=coach.id) for _ in range(3)]
        event_bus = AsyncMock()
        handler, resource_repo, _ = self._handler(coach, clients, event_bus=event_bus)

        # Act
        result = await handler.handle(
            CreateResource(
                coach_id=coach.id, name="Values Workbook", file_type="application/pdf"
            )
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.notified_clients == 3
        resource_repo.save.assert_awaited_once_with(result.value.resource)
        assert event_bus.emit.await_count == 3
        payloads = [call.args[1] for call in event_bus.emit.call_args_list]
        assert {p.client_id for p in payloads} == {c.id for c in clients}
        for call in event_bus.emit.call_args_list:
            kind, payload = call.args
            assert kind == NotificationKind.RESOURCE_SHARED
            assert isinstance(payload, ResourceShared)
            assert payload.coach_name == "jane"
            assert payload.resource_name == "Values Workbook"

    @pytest.mark.asyncio
    async def test_one_failing_emit_does_not_stop_the_others(self):
        coach = CoachProfile(id=uuid7(), user_id=uuid7(), email="jane@example.com")
        clients = [create_client(coach_id=coach.id) for _ in range(3)]
        event_bus = AsyncMock()
        event_bus.emit.side_effect = [None, RuntimeError("boom"), None]
        mock_logger = MagicMock()
        handler, _, _ = self._handler(
            coach, clients, event_bus=event_bus, logger=mock_logger
        )

        result = await handler.handle(
            CreateResource(coach_id=coach.id, name="Workbook", file_type="pdf")
        )

        assert isinstance(result, Success)
        assert event_bus.emit.await_count == 3
        assert result.value.notified_clients == 2
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.kwargs["client_id"] == str(clients[1].id)

    @pytest.mark.asyncio
    async def test_client_lookup_failure_keeps_resource(self):
        coach = CoachProfile(id=uuid7(), user_id=uuid7(), email="jane@example.com")
        event_bus = AsyncMock()
        mock_logger = MagicMock()
        handler, resource_repo, client_repo = self._handler(
            coach, [], event_bus=event_bus, logger=mock_logger
        )
        client_repo.list_active_by_coach.side_effect = RuntimeError("db timeout")

        result = await handler.handle(
            CreateResource(coach_id=coach.id, name="Workbook", file_type="pdf")
        )

        assert isinstance(result, Success)
        assert result.value.notified_clients == 0
        resource_repo.save.assert_awaited_once()
        event_bus.emit.assert_not_called()
        assert (
            mock_logger.error.call_args.args[0] == "resource_share_clients_lookup_failed"
        )

    @pytest.mark.asyncio
    async def test_no_clients_no_emits(self):
        coach = CoachProfile(id=uuid7(), user_id=uuid7(), email="jane@example.com")
        event_bus = AsyncMock()
        handler, _, _ = self._handler(coach, [], event_bus=event_bus)

        result = await handler.handle(
            CreateResource(coach_id=coach.id, name="Workbook", file_type="pdf")
        )

        assert isinstance(result, Success)
        event_bus.emit.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self):
        coach = CoachProfile(id=uuid7(), user_id=uuid7())
        handler, resource_repo, _ = self._handler(coach, [])

        result = await handler.handle(
            CreateResource(coach_id=coach.id, name="  ", file_type="pdf")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.domain_error.field == "name"
        resource_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_coach(self):
        handler, resource_repo, _ = self._handler(None, [])

        result = await handler.handle(
            CreateResource(coach_id=uuid7(), name="Workbook", file_type="pdf")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        resource_repo.save.assert_not_called()
