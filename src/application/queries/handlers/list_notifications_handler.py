"""List notifications query handler.

Validates paging input, then returns one page plus the totals the web
client needs to render a "load more" control.
"""

from dataclasses import dataclass

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.notification_queries import ListNotifications
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import Notification
from src.domain.errors import NotificationError
from src.domain.protocols.notification_repository import NotificationRepository

MAX_PAGE_SIZE = 100


@dataclass(frozen=True, kw_only=True)
class NotificationPage:
    """One page of notifications.

    Attributes:
        notifications: Page content, newest first.
        total: Notifications matching the filter.
        has_more: Whether another page follows.
    """

    notifications: list[Notification]
    total: int
    has_more: bool


def _invalid(message: str, field: str) -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError(
            code=ApplicationErrorCode.QUERY_VALIDATION_FAILED,
            message=message,
            domain_error=ValidationError(
                code=ErrorCode.INVALID_PAGINATION,
                message=message,
                field=field,
            ),
        )
    )


class ListNotificationsHandler:
    """Handler for ListNotifications query."""

    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notification_repo = notification_repo

    async def handle(
        self, query: ListNotifications
    ) -> Result[NotificationPage, ApplicationError]:
        """Handle list notifications query.

        Returns:
            Success(NotificationPage), or Failure(ApplicationError) when
            limit, offset or filter is out of range.
        """
        if not 1 <= query.limit <= MAX_PAGE_SIZE:
            return _invalid(NotificationError.INVALID_LIMIT, "limit")
        if query.offset < 0:
            return _invalid(NotificationError.INVALID_OFFSET, "offset")
        if query.filter not in ("all", "unread"):
            return _invalid(NotificationError.INVALID_FILTER, "filter")

        notifications, total = await self._notification_repo.list_for_user(
            query.user_id,
            limit=query.limit,
            offset=query.offset,
            unread_only=query.filter == "unread",
        )
        return Success(
            value=NotificationPage(
                notifications=notifications,
                total=total,
                has_more=query.offset + query.limit < total,
            )
        )
