"""Get notification preferences query handler.

Users who never changed a switch get a stored record with every switch on,
so reads and later updates see the same row.
"""

from src.application.errors import ApplicationError
from src.application.queries.notification_queries import GetNotificationPreferences
from src.core.result import Result, Success
from src.domain.entities import NotificationPreferences
from src.domain.protocols.notification_preferences_repository import (
    NotificationPreferencesRepository,
)


class GetNotificationPreferencesHandler:
    """Handler for GetNotificationPreferences query."""

    def __init__(self, preferences_repo: NotificationPreferencesRepository) -> None:
        self._preferences_repo = preferences_repo

    async def handle(
        self, query: GetNotificationPreferences
    ) -> Result[NotificationPreferences, ApplicationError]:
        preferences = await self._preferences_repo.get_or_create(query.user_id)
        return Success(value=preferences)
