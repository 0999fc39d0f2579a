"""Commands - Write operations that change state.

Commands are immutable dataclasses with imperative names (LogSession,
MarkNotificationRead). Each command has a handler in ``handlers/``.
"""

from src.application.commands.notification_commands import (
    MarkAllNotificationsRead,
    MarkNotificationRead,
    UpdateNotificationPreferences,
)
from src.application.commands.practice_commands import (
    CreateResource,
    LogSession,
    SetClientSchedule,
)

__all__ = [
    "CreateResource",
    "LogSession",
    "MarkAllNotificationsRead",
    "MarkNotificationRead",
    "SetClientSchedule",
    "UpdateNotificationPreferences",
]
