"""Domain entities.

Pure dataclasses with business rules and no infrastructure dependencies.
"""

from src.domain.entities.client_profile import ClientProfile
from src.domain.entities.coach_profile import DEFAULT_COACH_NAME, CoachProfile
from src.domain.entities.coach_session import CoachSession
from src.domain.entities.notification import Notification
from src.domain.entities.notification_preferences import (
    PREFERENCE_FIELDS,
    NotificationPreferences,
)
from src.domain.entities.resource import Resource
from src.domain.entities.user import User

__all__ = [
    "ClientProfile",
    "CoachProfile",
    "CoachSession",
    "DEFAULT_COACH_NAME",
    "Notification",
    "NotificationPreferences",
    "PREFERENCE_FIELDS",
    "Resource",
    "User",
]
