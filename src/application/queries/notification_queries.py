"""Notification queries (CQRS read operations).

Queries are immutable (frozen=True) and keyword-only (kw_only=True).
"""

from dataclasses import dataclass
from typing import Literal
from uuid import UUID

NotificationFilter = Literal["all", "unread"]


@dataclass(frozen=True, kw_only=True)
class ListNotifications:
    """Page of a user's notifications, newest first.

    Attributes:
        user_id: Recipient.
        limit: Page size (1-100).
        offset: Notifications to skip (>= 0).
        filter: ``all`` or ``unread``.
    """

    user_id: UUID
    limit: int = 10
    offset: int = 0
    filter: NotificationFilter = "all"


@dataclass(frozen=True, kw_only=True)
class CountUnreadNotifications:
    """Number of unread notifications of a user."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetNotificationPreferences:
    """A user's notification switches (all on if never set)."""

    user_id: UUID
