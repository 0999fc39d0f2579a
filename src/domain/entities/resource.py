"""Resource domain entity (file shared by a coach)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Resource:
    """A file the coach made available to their clients.

    Attributes:
        id: Resource identifier.
        coach_id: Uploading coach profile.
        name: Display name.
        file_type: MIME type or extension.
        description: Optional description shown in emails.
        created_at: Upload timestamp.
    """

    id: UUID
    coach_id: UUID
    name: str
    file_type: str
    created_at: datetime
    description: str | None = None
