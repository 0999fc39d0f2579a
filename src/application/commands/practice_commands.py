"""Coaching practice commands (CQRS write operations).

These are the operations that produce notification events:
- SetClientSchedule: stores a weekly slot and computes the next session
- LogSession: records a session, advances the schedule, may post a summary
- CreateResource: stores a resource and shares it with every active client

All commands are immutable (frozen=True) and keyword-only (kw_only=True).
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class SetClientSchedule:
    """Set a client's recurring weekly session.

    Attributes:
        coach_id: Acting coach (must own the client).
        client_id: Client profile to update.
        day: Weekday, 0 (Sunday) to 6 (Saturday).
        time: Local start time ``HH:MM``.
        timezone: IANA timezone id.

    Example:
        >>> command = SetClientSchedule(
        ...     coach_id=coach.id,
        ...     client_id=client.id,
        ...     day=1,
        ...     time="14:00",
        ...     timezone="America/New_York",
        ... )
    """

    coach_id: UUID
    client_id: UUID
    day: int
    time: str
    timezone: str


@dataclass(frozen=True, kw_only=True)
class LogSession:
    """Record a coaching session that took place.

    Attributes:
        coach_id: Acting coach (must own the client).
        client_id: Client the session was with.
        session_date: When the session happened (aware).
        topic: Optional topic.
        private_notes: Coach-only notes.
        shared_summary: Client-visible summary; when non-empty the client
            is notified.
    """

    coach_id: UUID
    client_id: UUID
    session_date: datetime
    topic: str | None = None
    private_notes: str | None = None
    shared_summary: str | None = None


@dataclass(frozen=True, kw_only=True)
class CreateResource:
    """Upload a resource and share it with the coach's clients.

    Attributes:
        coach_id: Uploading coach.
        name: Display name.
        file_type: MIME type or extension.
        description: Optional description.
    """

    coach_id: UUID
    name: str
    file_type: str
    description: str | None = None
