"""NotificationPreferencesRepository protocol."""

from typing import Protocol
from uuid import UUID

from src.domain.entities import NotificationPreferences


class NotificationPreferencesRepository(Protocol):
    """Notification preferences repository protocol (port)."""

    async def find_by_user_id(self, user_id: UUID) -> NotificationPreferences | None:
        """Stored preferences of a user, None if never created."""
        ...

    async def get_or_create(self, user_id: UUID) -> NotificationPreferences:
        """Stored preferences, creating an all-enabled record if absent."""
        ...

    async def update(self, preferences: NotificationPreferences) -> None:
        """Persist changed switches."""
        ...
