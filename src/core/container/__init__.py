"""Container module - Centralized dependency injection.

Re-exports every factory so callers import from one place:

    from src.core.container import get_event_bus, get_log_session_handler

The container is organized into modules:
- infrastructure: Core services (database, email, logging)
- events: Event bus and registry-driven subscriptions
- handlers: Command/query handler and job factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_email_service,
    get_logger,
)

# Event bus
from src.core.container.events import get_event_bus, reset_event_bus

# Handlers
from src.core.container.handlers import (
    get_count_unread_notifications_handler,
    get_create_resource_handler,
    get_get_notification_preferences_handler,
    get_list_notifications_handler,
    get_log_session_handler,
    get_mark_all_notifications_read_handler,
    get_mark_notification_read_handler,
    get_session_reminder_job,
    get_set_client_schedule_handler,
    get_update_notification_preferences_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_email_service",
    "get_logger",
    # Events
    "get_event_bus",
    "reset_event_bus",
    # Coaching operations
    "get_set_client_schedule_handler",
    "get_log_session_handler",
    "get_create_resource_handler",
    "get_session_reminder_job",
    # Notification center
    "get_list_notifications_handler",
    "get_count_unread_notifications_handler",
    "get_mark_notification_read_handler",
    "get_mark_all_notifications_read_handler",
    "get_get_notification_preferences_handler",
    "get_update_notification_preferences_handler",
]
