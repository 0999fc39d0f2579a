"""Schedule domain errors.

Invalid weekly schedule input is rejected, never defaulted. The calculator
raises ``InvalidScheduleError`` (a ``ValueError``) carrying one of the
``ScheduleError`` messages; application handlers turn it into a
``Failure(ValidationError(...))``.

Usage:
    from src.domain.errors import InvalidScheduleError, ScheduleError

    raise InvalidScheduleError(ScheduleError.INVALID_TIME, field="time")
"""


class ScheduleError:
    """Schedule error message constants."""

    INVALID_DAY = "Schedule day must be an integer between 0 (Sunday) and 6 (Saturday)"
    """Weekday outside the Sunday-first 0-6 range."""

    INVALID_TIME = "Schedule time must be in HH:MM 24-hour format"
    """Local time not matching HH:MM (00:00 - 23:59)."""

    UNKNOWN_TIMEZONE = "Schedule timezone is not a known IANA timezone"
    """Timezone id not found in the tz database."""

    NAIVE_REFERENCE = "Reference instant must be timezone-aware"
    """Reference datetime without tzinfo is ambiguous."""


class InvalidScheduleError(ValueError):
    """Raised when a weekly schedule cannot be evaluated.

    Attributes:
        field: Offending input (day, time, timezone, now).
    """

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field
