"""Database models for the persistence layer.

Models Organization:
    - user.py: User accounts
    - coach_profile.py / client_profile.py: Coaching relationship and schedule
    - coach_session.py: Logged sessions
    - resource.py: Shared resources
    - notification.py: In-app notifications
    - notification_preferences.py: Per-user delivery switches

Note:
    Domain entities (dataclasses) live in src/domain/entities/ and are
    mapped to these models by the repositories.
"""

from src.infrastructure.persistence.models.client_profile import ClientProfile
from src.infrastructure.persistence.models.coach_profile import CoachProfile
from src.infrastructure.persistence.models.coach_session import CoachSession
from src.infrastructure.persistence.models.notification import Notification
from src.infrastructure.persistence.models.notification_preferences import (
    NotificationPreferences,
)
from src.infrastructure.persistence.models.resource import Resource
from src.infrastructure.persistence.models.user import User

__all__ = [
    "ClientProfile",
    "CoachProfile",
    "CoachSession",
    "Notification",
    "NotificationPreferences",
    "Resource",
    "User",
]
