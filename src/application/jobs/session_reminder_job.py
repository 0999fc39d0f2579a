"""Daily session reminder scan.

Finds clients whose next session starts between ``now + lookahead`` and
``now + lookahead + window`` (24h and 24h by default) and emits one
SessionReminder per client. Delivery happens in the bus subscribers.

Flow:
1. Query due clients (linked user required); a failure here propagates
2. For each client: resolve coach display name, emit SessionReminder
3. Per-client failures are logged and counted; the scan continues
4. Return a run summary

Nothing marks a client as reminded: running the scan twice inside the same
window emits twice.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from src.domain.entities import ClientProfile
from src.domain.entities.coach_profile import DEFAULT_COACH_NAME
from src.domain.enums import NotificationKind
from src.domain.events import SessionReminder
from src.domain.protocols.client_profile_repository import ClientProfileRepository
from src.domain.protocols.coach_profile_repository import CoachProfileRepository
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


@dataclass(frozen=True, kw_only=True)
class ReminderRunSummary:
    """Outcome of one scan.

    Attributes:
        window_start: Inclusive lower bound that was queried (UTC).
        window_end: Exclusive upper bound that was queried (UTC).
        matched: Clients found in the window.
        emitted: Reminders emitted.
        failed: Clients whose reminder could not be emitted.
    """

    window_start: datetime
    window_end: datetime
    matched: int
    emitted: int
    failed: int


class SessionReminderJob:
    """Emits SessionReminder for every session starting tomorrow."""

    def __init__(
        self,
        client_repo: ClientProfileRepository,
        coach_repo: CoachProfileRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
        *,
        lookahead_hours: int = 24,
        window_hours: int = 24,
    ) -> None:
        self._client_repo = client_repo
        self._coach_repo = coach_repo
        self._event_bus = event_bus
        self._logger = logger
        self._lookahead = timedelta(hours=lookahead_hours)
        self._window = timedelta(hours=window_hours)

    async def run(self, now: datetime | None = None) -> ReminderRunSummary:
        """Scan once.

        Args:
            now: Reference instant (defaults to the current UTC time).

        Returns:
            ReminderRunSummary with per-run counters.

        Raises:
            Exception: Whatever the bulk client query raised.
        """
        now = now or datetime.now(UTC)
        window_start = now + self._lookahead
        window_end = window_start + self._window

        self._logger.info(
            "session_reminder_scan_started",
            window_start=window_start.isoformat(),
            window_end=window_end.isoformat(),
        )
        clients = await self._client_repo.find_due_for_reminder(window_start, window_end)

        emitted = 0
        failed = 0
        for client in clients:
            try:
                if await self._remind(client):
                    emitted += 1
            except Exception as e:
                failed += 1
                self._logger.error(
                    "session_reminder_failed",
                    error=e,
                    client_id=str(client.id),
                )

        summary = ReminderRunSummary(
            window_start=window_start,
            window_end=window_end,
            matched=len(clients),
            emitted=emitted,
            failed=failed,
        )
        self._logger.info(
            "session_reminder_scan_completed",
            matched=summary.matched,
            emitted=summary.emitted,
            failed=summary.failed,
        )
        return summary

    async def _remind(self, client: ClientProfile) -> bool:
        if client.next_session_date is None:
            return False
        coach = await self._coach_repo.find_by_id(client.coach_id)
        if coach is None:
            self._logger.warning(
                "session_reminder_coach_missing",
                client_id=str(client.id),
                coach_id=str(client.coach_id),
            )
        await self._event_bus.emit(
            NotificationKind.SESSION_REMINDER,
            SessionReminder(
                client_id=client.id,
                session_date=client.next_session_date,
                coach_name=coach.display_name if coach else DEFAULT_COACH_NAME,
            ),
        )
        return True
