"""Unit tests for notification domain entities.

Tests cover:
- NotificationPreferences: defaults, per-(channel, kind) lookup, apply
- ClientProfile: schedule assembly, notification eligibility, ownership
- CoachProfile: display name fallback
- User: greeting name fallback
- Notification: ownership and read flag
- CoachSession: shared summary detection
"""

from datetime import UTC, datetime

import pytest
from uuid_extensions import uuid7

from src.domain.entities import (
    ClientProfile,
    CoachProfile,
    CoachSession,
    Notification,
    NotificationPreferences,
    User,
)
from src.domain.enums import ClientType, NotificationChannel, NotificationKind
from src.domain.errors import InvalidScheduleError
from src.domain.value_objects import WeeklySchedule


@pytest.mark.unit
class TestNotificationPreferences:
    """Test preference switches."""

    def test_everything_enabled_by_default(self):
        preferences = NotificationPreferences(id=uuid7(), user_id=uuid7())

        for channel in NotificationChannel:
            for kind in NotificationKind:
                assert preferences.is_enabled(channel, kind) is True

    def test_disabled_switch_only_affects_its_channel(self):
        preferences = NotificationPreferences(
            id=uuid7(), user_id=uuid7(), email_session_reminders=False
        )

        assert not preferences.is_enabled(
            NotificationChannel.EMAIL, NotificationKind.SESSION_REMINDER
        )
        assert preferences.is_enabled(
            NotificationChannel.IN_APP, NotificationKind.SESSION_REMINDER
        )
        assert preferences.is_enabled(
            NotificationChannel.EMAIL, NotificationKind.RESOURCE_SHARED
        )

    def test_apply_changes_named_switches(self):
        preferences = NotificationPreferences(id=uuid7(), user_id=uuid7())

        preferences.apply(
            {"in_app_resource_shared": False, "email_session_summaries": False}
        )

        assert preferences.in_app_resource_shared is False
        assert preferences.email_session_summaries is False
        assert preferences.email_resource_shared is True

    def test_apply_rejects_unknown_switch(self):
        preferences = NotificationPreferences(id=uuid7(), user_id=uuid7())

        with pytest.raises(ValueError, match="Unknown preference"):
            preferences.apply({"sms_session_reminders": False})


@pytest.mark.unit
class TestClientProfile:
    """Test client profile behavior."""

    def test_schedule_none_when_incomplete(self):
        client = ClientProfile(id=uuid7(), coach_id=uuid7(), schedule_day=1)

        assert client.schedule is None

    def test_schedule_assembled_from_fields(self):
        client = ClientProfile(
            id=uuid7(),
            coach_id=uuid7(),
            schedule_day=1,
            schedule_time="14:00",
            schedule_timezone="America/New_York",
        )

        assert client.schedule == WeeklySchedule(
            day=1, time="14:00", timezone="America/New_York"
        )

    def test_malformed_stored_schedule_raises(self):
        client = ClientProfile(
            id=uuid7(),
            coach_id=uuid7(),
            schedule_day=1,
            schedule_time="2pm",
            schedule_timezone="UTC",
        )

        with pytest.raises(InvalidScheduleError):
            _ = client.schedule

    def test_offline_client_cannot_receive_notifications(self):
        client = ClientProfile(
            id=uuid7(), coach_id=uuid7(), client_type=ClientType.OFFLINE
        )

        assert client.can_receive_notifications() is False

    def test_deleted_client_cannot_receive_notifications(self):
        client = ClientProfile(
            id=uuid7(),
            coach_id=uuid7(),
            user_id=uuid7(),
            deleted_at=datetime.now(UTC),
        )

        assert client.can_receive_notifications() is False

    def test_linked_client_can_receive_notifications(self):
        client = ClientProfile(id=uuid7(), coach_id=uuid7(), user_id=uuid7())

        assert client.can_receive_notifications() is True

    def test_ownership(self):
        coach_id = uuid7()
        client = ClientProfile(id=uuid7(), coach_id=coach_id)

        assert client.is_owned_by(coach_id)
        assert not client.is_owned_by(uuid7())


@pytest.mark.unit
class TestDisplayNames:
    def test_coach_display_name_is_email_local_part(self):
        coach = CoachProfile(id=uuid7(), user_id=uuid7(), email="jane.doe@example.com")

        assert coach.display_name == "jane.doe"

    @pytest.mark.parametrize("email", [None, "", "@example.com"])
    def test_coach_display_name_fallback(self, email):
        coach = CoachProfile(id=uuid7(), user_id=uuid7(), email=email)

        assert coach.display_name == "Your Coach"

    def test_user_greeting_fallback(self):
        user = User(
            id=uuid7(), email="sam@example.com", username=None, created_at=datetime.now(UTC)
        )

        assert user.greeting_name == "Client"


@pytest.mark.unit
class TestNotificationAndSession:
    def test_notification_mark_read(self):
        user_id = uuid7()
        notification = Notification(
            id=uuid7(),
            user_id=user_id,
            kind=NotificationKind.RESOURCE_SHARED,
            title="New Resource",
            message="jane shared \"Workbook\" with you",
            created_at=datetime.now(UTC),
        )

        notification.mark_read()

        assert notification.read is True
        assert notification.is_owned_by(user_id)
        assert not notification.is_owned_by(uuid7())

    @pytest.mark.parametrize(
        ("summary", "expected"),
        [(None, False), ("", False), ("   ", False), ("Great progress", True)],
    )
    def test_has_shared_summary(self, summary, expected):
        session = CoachSession(
            id=uuid7(),
            coach_id=uuid7(),
            client_id=uuid7(),
            session_date=datetime.now(UTC),
            session_number=1,
            shared_summary=summary,
        )

        assert session.has_shared_summary() is expected
