"""NotificationRepository protocol for in-app notifications."""

from typing import Protocol
from uuid import UUID

from src.domain.entities import Notification


class NotificationRepository(Protocol):
    """Notification repository protocol (port).

    Methods:
        save: Create new notification
        find_by_id: Retrieve notification by ID
        list_for_user: Page of a user's notifications, newest first
        mark_read: Mark one notification read
        mark_all_read: Mark every unread notification of a user read
        count_unread: Number of unread notifications of a user
    """

    async def save(self, notification: Notification) -> None:
        """Create new notification."""
        ...

    async def find_by_id(self, notification_id: UUID) -> Notification | None:
        """Find notification by ID."""
        ...

    async def list_for_user(
        self,
        user_id: UUID,
        *,
        limit: int,
        offset: int,
        unread_only: bool = False,
    ) -> tuple[list[Notification], int]:
        """Page of notifications, newest first.

        Returns:
            Tuple of (page, total matching notifications).
        """
        ...

    async def mark_read(self, notification_id: UUID) -> None:
        """Set the read flag on one notification."""
        ...

    async def mark_all_read(self, user_id: UUID) -> int:
        """Set the read flag on all unread notifications of a user.

        Returns:
            Number of notifications updated.
        """
        ...

    async def count_unread(self, user_id: UUID) -> int:
        """Number of unread notifications of a user."""
        ...
