"""CoachSessionRepository protocol."""

from typing import Protocol
from uuid import UUID

from src.domain.entities import CoachSession


class CoachSessionRepository(Protocol):
    """Coach session repository protocol (port)."""

    async def find_by_id(self, session_id: UUID) -> CoachSession | None:
        """Find logged session by ID."""
        ...

    async def next_session_number(self, client_id: UUID) -> int:
        """Running number for the client's next session (1 for the first)."""
        ...

    async def save(self, session: CoachSession) -> None:
        """Create new coach session."""
        ...
