"""Weekday numbering used by recurring session schedules.

Schedules store the weekday as an integer with Sunday as 0, which differs
from ``datetime.weekday()`` (Monday = 0). Use ``Weekday.of()`` to convert a
``datetime`` into this numbering.

Usage:
    from src.domain.enums import Weekday

    Weekday.of(local_now) == Weekday.MONDAY
"""

from datetime import date
from enum import IntEnum


class Weekday(IntEnum):
    """Day of week, 0 = Sunday through 6 = Saturday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, day: date) -> "Weekday":
        """Weekday of a date (or datetime) in the Sunday-first numbering.

        Args:
            day: Date or datetime, already in the relevant local timezone.

        Returns:
            Weekday: The matching member.
        """
        # isoweekday(): Monday = 1 ... Sunday = 7
        return cls(day.isoweekday() % 7)
