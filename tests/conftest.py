"""Pytest configuration and shared fixtures.

This configuration provides:
1. Mock logger for unit tests
2. A fresh file-backed SQLite database per integration test
3. Helpers that insert users, coaches and clients directly as models
"""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from uuid_extensions import uuid7

from src.infrastructure.persistence.database import Database


@pytest.fixture
def mock_logger():
    """Logger double implementing LoggerProtocol by duck typing."""
    return MagicMock()


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Fresh SQLite database (aiosqlite) with all tables created.

    Each test gets its own file, so nothing leaks between tests and the
    delivery handlers can open their own sessions on the same data.
    """
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'loom_test.db'}")
    await db.create_all()

    yield db

    await db.close()


async def create_user_in_db(session, user_id=None, email=None, username="Sam"):
    """Insert a user row."""
    from src.infrastructure.persistence.models.user import User as UserModel

    user_id = user_id or uuid7()
    session.add(
        UserModel(
            id=user_id,
            email=email or f"user_{user_id.hex}@example.com",
            username=username,
        )
    )
    await session.commit()
    return user_id


async def create_coach_in_db(session, email="jane.doe@example.com"):
    """Insert a coach (user + coach profile). Returns the coach profile id."""
    from src.infrastructure.persistence.models.coach_profile import (
        CoachProfile as CoachProfileModel,
    )

    user_id = await create_user_in_db(session, email=email, username="Jane")
    coach_id = uuid7()
    session.add(CoachProfileModel(id=coach_id, user_id=user_id))
    await session.commit()
    return coach_id


async def create_client_in_db(
    session,
    coach_id,
    user_id=None,
    next_session_date: datetime | None = None,
    schedule_day: int | None = None,
    schedule_time: str | None = None,
    schedule_timezone: str | None = None,
    deleted_at: datetime | None = None,
    client_type: str = "registered",
):
    """Insert a client profile. Returns its id."""
    from src.infrastructure.persistence.models.client_profile import (
        ClientProfile as ClientProfileModel,
    )

    client_id = uuid7()
    session.add(
        ClientProfileModel(
            id=client_id,
            coach_id=coach_id,
            user_id=user_id,
            client_type=client_type,
            schedule_day=schedule_day,
            schedule_time=schedule_time,
            schedule_timezone=schedule_timezone,
            next_session_date=(
                next_session_date.astimezone(UTC) if next_session_date else None
            ),
            deleted_at=deleted_at,
        )
    )
    await session.commit()
    return client_id
