"""Coach session domain entity (a logged coaching session)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class CoachSession:
    """A session the coach logged for a client.

    Attributes:
        id: Session identifier.
        coach_id: Coach profile that ran the session.
        client_id: Client profile the session was with.
        session_date: When the session took place.
        session_number: 1-based running number per client.
        topic: Optional topic.
        private_notes: Coach-only notes, never sent to the client.
        shared_summary: Summary visible to the client, optional.
    """

    id: UUID
    coach_id: UUID
    client_id: UUID
    session_date: datetime
    session_number: int
    topic: str | None = None
    private_notes: str | None = None
    shared_summary: str | None = None

    def has_shared_summary(self) -> bool:
        return bool(self.shared_summary and self.shared_summary.strip())
