"""Repository implementations (SQLAlchemy adapters).

Usage:
    async with database.get_session() as session:
        repo = NotificationRepository(session)
"""

from src.infrastructure.persistence.repositories.client_profile_repository import (
    ClientProfileRepository,
)
from src.infrastructure.persistence.repositories.coach_profile_repository import (
    CoachProfileRepository,
)
from src.infrastructure.persistence.repositories.coach_session_repository import (
    CoachSessionRepository,
)
from src.infrastructure.persistence.repositories.notification_preferences_repository import (
    NotificationPreferencesRepository,
)
from src.infrastructure.persistence.repositories.notification_repository import (
    NotificationRepository,
)
from src.infrastructure.persistence.repositories.resource_repository import (
    ResourceRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "ClientProfileRepository",
    "CoachProfileRepository",
    "CoachSessionRepository",
    "NotificationPreferencesRepository",
    "NotificationRepository",
    "ResourceRepository",
    "UserRepository",
]
