"""Domain value objects.

Usage:
    from src.domain.value_objects import WeeklySchedule, calculate_next_session_date
"""

from src.domain.value_objects.weekly_schedule import (
    WeeklySchedule,
    calculate_next_session_date,
)

__all__ = ["WeeklySchedule", "calculate_next_session_date"]
