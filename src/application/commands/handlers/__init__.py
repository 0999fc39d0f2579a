"""Command handlers.

Each handler takes its dependencies (repository protocols, event bus,
logger) in ``__init__`` and exposes ``async handle(cmd) -> Result``.
"""

from src.application.commands.handlers.create_resource_handler import (
    CreateResourceHandler,
    SharedResource,
)
from src.application.commands.handlers.log_session_handler import LogSessionHandler
from src.application.commands.handlers.mark_all_notifications_read_handler import (
    MarkAllNotificationsReadHandler,
)
from src.application.commands.handlers.mark_notification_read_handler import (
    MarkNotificationReadHandler,
)
from src.application.commands.handlers.set_client_schedule_handler import (
    SetClientScheduleHandler,
)
from src.application.commands.handlers.update_notification_preferences_handler import (
    UpdateNotificationPreferencesHandler,
)

__all__ = [
    "CreateResourceHandler",
    "LogSessionHandler",
    "MarkAllNotificationsReadHandler",
    "MarkNotificationReadHandler",
    "SetClientScheduleHandler",
    "SharedResource",
    "UpdateNotificationPreferencesHandler",
]
