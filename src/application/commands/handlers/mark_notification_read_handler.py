"""Mark notification read handler.

Flow:
1. Find notification
2. Verify it belongs to the acting user
3. Set the read flag (already-read notifications are left as they are)
4. Return the notification
"""

from src.application.commands.notification_commands import MarkNotificationRead
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities import Notification
from src.domain.errors import NotificationError
from src.domain.protocols.notification_repository import NotificationRepository


class MarkNotificationReadHandler:
    """Handler for MarkNotificationRead command."""

    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notification_repo = notification_repo

    async def handle(
        self, cmd: MarkNotificationRead
    ) -> Result[Notification, ApplicationError]:
        notification = await self._notification_repo.find_by_id(cmd.notification_id)
        if notification is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=NotificationError.NOTIFICATION_NOT_FOUND,
                    domain_error=NotFoundError(
                        code=ErrorCode.NOTIFICATION_NOT_FOUND,
                        message=NotificationError.NOTIFICATION_NOT_FOUND,
                        resource_type="Notification",
                        resource_id=str(cmd.notification_id),
                    ),
                )
            )

        if not notification.is_owned_by(cmd.user_id):
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.FORBIDDEN,
                    message=NotificationError.NOTIFICATION_NOT_OWNED,
                    domain_error=AuthorizationError(
                        code=ErrorCode.RESOURCE_NOT_OWNED,
                        message=NotificationError.NOTIFICATION_NOT_OWNED,
                    ),
                )
            )

        if not notification.read:
            await self._notification_repo.mark_read(notification.id)
            notification.mark_read()

        return Success(value=notification)
