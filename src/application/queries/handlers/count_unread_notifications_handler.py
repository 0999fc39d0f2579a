"""Count unread notifications query handler."""

from src.application.errors import ApplicationError
from src.application.queries.notification_queries import CountUnreadNotifications
from src.core.result import Result, Success
from src.domain.protocols.notification_repository import NotificationRepository


class CountUnreadNotificationsHandler:
    """Handler for CountUnreadNotifications query."""

    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notification_repo = notification_repo

    async def handle(self, query: CountUnreadNotifications) -> Result[int, ApplicationError]:
        return Success(value=await self._notification_repo.count_unread(query.user_id))
