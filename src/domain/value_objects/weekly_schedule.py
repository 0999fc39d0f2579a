"""Weekly schedule value object and next-occurrence calculation.

A client's recurring session is stored as a weekday, a local wall-clock time
and an IANA timezone. The absolute instant of the next session is derived
from those three values and a reference instant.

Rules:
    - Weekdays use the Sunday-first numbering (0 = Sunday ... 6 = Saturday).
    - Time is strictly ``HH:MM`` in 24-hour form.
    - If the reference instant already falls on the target weekday (in the
      schedule's timezone) the result is the same weekday of the following
      week, even when today's slot is still ahead. A session logged today
      therefore always advances the schedule by a full week.
    - Local times that are ambiguous or skipped by a DST transition resolve
      with ``fold=0``: the earlier of two ambiguous instants, and the
      pre-transition offset for a skipped time.

Usage:
    >>> from datetime import UTC, datetime
    >>> calculate_next_session_date(1, "14:00", "America/New_York",
    ...     now=datetime(2024, 3, 4, 15, 0, tzinfo=UTC))
    datetime.datetime(2024, 3, 11, 18, 0, tzinfo=datetime.timezone.utc)
"""

import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from datetime import time as dt_time
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from src.domain.enums import Weekday
from src.domain.errors import InvalidScheduleError, ScheduleError

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


@dataclass(frozen=True)
class WeeklySchedule:
    """Recurring weekly session slot.

    Attributes:
        day: Weekday, 0 (Sunday) to 6 (Saturday).
        time: Local start time, ``HH:MM``.
        timezone: IANA timezone id (e.g. ``Europe/London``).

    Raises:
        InvalidScheduleError: If any attribute is malformed.

    Example:
        >>> WeeklySchedule(day=2, time="9:30", timezone="UTC")
        Traceback (most recent call last):
        ...
        InvalidScheduleError: Schedule time must be in HH:MM 24-hour format
    """

    day: int
    time: str
    timezone: str

    def __post_init__(self) -> None:
        if (
            isinstance(self.day, bool)
            or not isinstance(self.day, int)
            or not 0 <= self.day <= 6
        ):
            raise InvalidScheduleError(ScheduleError.INVALID_DAY, field="day")
        if not isinstance(self.time, str) or not TIME_PATTERN.match(self.time):
            raise InvalidScheduleError(ScheduleError.INVALID_TIME, field="time")
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
            raise InvalidScheduleError(
                ScheduleError.UNKNOWN_TIMEZONE, field="timezone"
            ) from e

    @property
    def weekday(self) -> Weekday:
        return Weekday(self.day)

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @property
    def local_time(self) -> dt_time:
        hour, minute = self.time.split(":")
        return dt_time(int(hour), int(minute))

    def next_occurrence(self, reference: datetime) -> datetime:
        """Next session start strictly after the reference day.

        Args:
            reference: Timezone-aware instant to count from.

        Returns:
            datetime: Start of the next session, in UTC.

        Raises:
            InvalidScheduleError: If ``reference`` is naive.
        """
        if reference.tzinfo is None or reference.utcoffset() is None:
            raise InvalidScheduleError(ScheduleError.NAIVE_REFERENCE, field="now")

        local_now = reference.astimezone(self.zone)
        days_ahead = (self.day - Weekday.of(local_now)) % 7
        if days_ahead == 0:
            days_ahead = 7

        target_date = local_now.date() + timedelta(days=days_ahead)
        local_start = datetime.combine(target_date, self.local_time, tzinfo=self.zone)
        return local_start.astimezone(UTC)


def calculate_next_session_date(
    day: int,
    time: str,
    timezone: str,
    now: datetime | None = None,
) -> datetime:
    """Compute the next absolute session start for a weekly slot.

    Args:
        day: Weekday, 0 (Sunday) to 6 (Saturday).
        time: Local start time, ``HH:MM``.
        timezone: IANA timezone id.
        now: Reference instant (timezone-aware). Defaults to the current time.

    Returns:
        datetime: UTC instant of the next session.

    Raises:
        InvalidScheduleError: On malformed day, time, timezone or a naive
            reference instant.
    """
    schedule = WeeklySchedule(day=day, time=time, timezone=timezone)
    return schedule.next_occurrence(now if now is not None else datetime.now(UTC))
