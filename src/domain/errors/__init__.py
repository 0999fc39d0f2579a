"""Domain errors package.

Usage:
    from src.domain.errors import InvalidScheduleError, NotificationError
"""

from src.domain.errors.notification_error import NotificationError, PracticeError
from src.domain.errors.schedule_error import InvalidScheduleError, ScheduleError

__all__ = [
    "InvalidScheduleError",
    "NotificationError",
    "PracticeError",
    "ScheduleError",
]
