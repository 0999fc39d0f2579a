"""CoachProfileRepository protocol."""

from typing import Protocol
from uuid import UUID

from src.domain.entities import CoachProfile


class CoachProfileRepository(Protocol):
    """Coach profile repository protocol (port)."""

    async def find_by_id(self, coach_id: UUID) -> CoachProfile | None:
        """Find coach profile by ID, with the coach's email loaded.

        Returns:
            CoachProfile if found, None otherwise.
        """
        ...

    async def save(self, coach: CoachProfile) -> None:
        """Create new coach profile."""
        ...
