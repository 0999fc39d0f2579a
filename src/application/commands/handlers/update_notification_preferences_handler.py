"""Update notification preferences handler.

Flow:
1. Load the user's preferences (created with every switch on if absent)
2. Apply the switches given in the command
3. Store and return the full preferences
"""

from src.application.commands.notification_commands import UpdateNotificationPreferences
from src.application.errors import ApplicationError
from src.core.result import Result, Success
from src.domain.entities import NotificationPreferences
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.notification_preferences_repository import (
    NotificationPreferencesRepository,
)


class UpdateNotificationPreferencesHandler:
    """Handler for UpdateNotificationPreferences command."""

    def __init__(
        self,
        preferences_repo: NotificationPreferencesRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._preferences_repo = preferences_repo
        self._logger = logger

    async def handle(
        self, cmd: UpdateNotificationPreferences
    ) -> Result[NotificationPreferences, ApplicationError]:
        preferences = await self._preferences_repo.get_or_create(cmd.user_id)

        changes = cmd.changes()
        if changes:
            preferences.apply(changes)
            await self._preferences_repo.update(preferences)
            self._logger.info(
                "notification_preferences_updated",
                user_id=str(cmd.user_id),
                changed=sorted(changes),
            )

        return Success(value=preferences)
