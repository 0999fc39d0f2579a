"""User domain entity (notification recipient)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class User:
    """Account that can receive notifications.

    Attributes:
        id: Unique user identifier.
        email: Delivery address for email notifications.
        username: Display name used in greetings (may be empty).
        created_at: Timestamp when user was created.
    """

    id: UUID
    email: str
    username: str | None
    created_at: datetime

    @property
    def greeting_name(self) -> str:
        """Name used in email greetings, ``"Client"`` when unset."""
        return self.username or "Client"
