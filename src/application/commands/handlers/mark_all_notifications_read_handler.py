"""Mark all notifications read handler."""

from src.application.commands.notification_commands import MarkAllNotificationsRead
from src.application.errors import ApplicationError
from src.core.result import Result, Success
from src.domain.protocols.notification_repository import NotificationRepository


class MarkAllNotificationsReadHandler:
    """Handler for MarkAllNotificationsRead command.

    Returns:
        Success(int) with the number of notifications that changed.
    """

    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notification_repo = notification_repo

    async def handle(self, cmd: MarkAllNotificationsRead) -> Result[int, ApplicationError]:
        updated = await self._notification_repo.mark_all_read(cmd.user_id)
        return Success(value=updated)
