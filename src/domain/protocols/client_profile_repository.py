"""ClientProfileRepository protocol.

Port for client profile persistence, including the schedule queries the
reminder job depends on and the single-write session bookkeeping used when
a session is logged.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities import ClientProfile


class ClientProfileRepository(Protocol):
    """Client profile repository protocol (port).

    Methods:
        find_by_id: Retrieve client profile by ID
        find_due_for_reminder: Clients with a session in a time window
        list_active_by_coach: Non-deleted clients of a coach
        update_schedule: Store a new recurring schedule
        record_session_logged: Advance schedule and counter in one write
        save: Create new client profile
    """

    async def find_by_id(self, client_id: UUID) -> ClientProfile | None:
        """Find client profile by ID.

        Returns:
            ClientProfile if found, None otherwise.
        """
        ...

    async def find_due_for_reminder(
        self, window_start: datetime, window_end: datetime
    ) -> list[ClientProfile]:
        """Clients whose next session falls in ``[window_start, window_end)``.

        Only clients with a linked user account are returned.

        Args:
            window_start: Inclusive lower bound (aware).
            window_end: Exclusive upper bound (aware).

        Returns:
            Matching client profiles ordered by next_session_date.
        """
        ...

    async def list_active_by_coach(self, coach_id: UUID) -> list[ClientProfile]:
        """All non-deleted clients of a coach."""
        ...

    async def update_schedule(
        self,
        client_id: UUID,
        *,
        day: int,
        time: str,
        timezone: str,
        next_session_date: datetime,
    ) -> None:
        """Persist a recurring schedule and its computed next session."""
        ...

    async def record_session_logged(
        self,
        client_id: UUID,
        *,
        next_session_date: datetime | None,
        logged_at: datetime,
    ) -> None:
        """Record a logged session in a single write.

        Increments ``session_count`` by one, sets ``last_activity_date`` and,
        when ``next_session_date`` is given, advances the schedule. The
        increment happens in the database, so concurrent writers do not lose
        updates.
        """
        ...

    async def save(self, client: ClientProfile) -> None:
        """Create new client profile."""
        ...
