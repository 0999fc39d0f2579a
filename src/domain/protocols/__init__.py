"""Domain protocols (ports).

Infrastructure adapters implement these structurally; nothing inherits from
them.
"""

from src.domain.protocols.client_profile_repository import ClientProfileRepository
from src.domain.protocols.coach_profile_repository import CoachProfileRepository
from src.domain.protocols.coach_session_repository import CoachSessionRepository
from src.domain.protocols.email_protocol import EmailMessage, EmailProtocol
from src.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    NotificationHandler,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.notification_preferences_repository import (
    NotificationPreferencesRepository,
)
from src.domain.protocols.notification_repository import NotificationRepository
from src.domain.protocols.resource_repository import ResourceRepository
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    "ClientProfileRepository",
    "CoachProfileRepository",
    "CoachSessionRepository",
    "EmailMessage",
    "EmailProtocol",
    "EventBusProtocol",
    "LoggerProtocol",
    "NotificationHandler",
    "NotificationPreferencesRepository",
    "NotificationRepository",
    "ResourceRepository",
    "UserRepository",
]
