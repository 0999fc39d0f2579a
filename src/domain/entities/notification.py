"""Notification domain entity (in-app notification).

Created only by the in-app delivery handler. The only mutation allowed is
marking it read; notifications are never deleted.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from src.domain.enums import NotificationKind


@dataclass
class Notification:
    """In-app notification shown to a user.

    Attributes:
        id: Notification identifier.
        user_id: Recipient user.
        kind: Notification kind that produced it.
        title: Short title.
        message: One-line message.
        created_at: Creation timestamp.
        read: Whether the recipient has seen it.
        metadata: Kind-specific references (client id, session id, ...).
    """

    id: UUID
    user_id: UUID
    kind: NotificationKind
    title: str
    message: str
    created_at: datetime
    read: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.user_id == user_id

    def mark_read(self) -> None:
        self.read = True
