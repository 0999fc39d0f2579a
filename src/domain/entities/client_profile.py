"""Client profile domain entity.

Holds the client's recurring weekly schedule and the derived absolute
``next_session_date`` that the reminder job scans.

Business Rules:
    - Only clients with a linked user account receive notifications
    - A soft-deleted client (``deleted_at`` set) is excluded from fan-out
    - ``session_count`` only ever grows, by one per logged session
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import ClientType
from src.domain.value_objects import WeeklySchedule


@dataclass
class ClientProfile:
    """Coaching client.

    Attributes:
        id: Client profile identifier.
        coach_id: Owning coach profile.
        client_type: Registered, offline or invited.
        user_id: Linked user account (None for offline/invited clients).
        display_name: Coach-facing name for clients without an account.
        schedule_day: Weekday of recurring session (0 = Sunday), optional.
        schedule_time: Local ``HH:MM`` start time, optional.
        schedule_timezone: IANA timezone of the schedule, optional.
        next_session_date: Next absolute session start (UTC), optional.
        session_count: Number of sessions logged so far.
        last_activity_date: Last time a session was logged.
        deleted_at: Soft-delete timestamp.
    """

    id: UUID
    coach_id: UUID
    client_type: ClientType = ClientType.REGISTERED
    user_id: UUID | None = None
    display_name: str | None = None
    schedule_day: int | None = None
    schedule_time: str | None = None
    schedule_timezone: str | None = None
    next_session_date: datetime | None = None
    session_count: int = 0
    last_activity_date: datetime | None = None
    deleted_at: datetime | None = None

    @property
    def schedule(self) -> WeeklySchedule | None:
        """Recurring schedule, or None if any part is unset.

        Raises:
            InvalidScheduleError: If stored values are malformed.
        """
        if (
            self.schedule_day is None
            or self.schedule_time is None
            or self.schedule_timezone is None
        ):
            return None
        return WeeklySchedule(
            day=self.schedule_day,
            time=self.schedule_time,
            timezone=self.schedule_timezone,
        )

    def can_receive_notifications(self) -> bool:
        return self.user_id is not None and self.deleted_at is None

    def is_owned_by(self, coach_id: UUID) -> bool:
        return self.coach_id == coach_id
