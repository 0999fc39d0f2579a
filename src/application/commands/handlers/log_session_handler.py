"""Log session handler.

Flow:
1. Find client profile and verify the acting coach owns it
2. Number and store the session
3. Advance the schedule and increment the session counter (one write)
4. If a shared summary was attached, emit SessionSummaryPosted
5. Return the stored session

The emit happens after every write succeeded and is wrapped: a notification
problem is logged and never turns a logged session into a failure.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.practice_commands import LogSession
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities import ClientProfile, CoachSession
from src.domain.enums import NotificationKind
from src.domain.errors import InvalidScheduleError, PracticeError
from src.domain.events import SessionSummaryPosted
from src.domain.protocols.client_profile_repository import ClientProfileRepository
from src.domain.protocols.coach_session_repository import CoachSessionRepository
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


class LogSessionHandler:
    """Handler for LogSession command."""

    def __init__(
        self,
        client_repo: ClientProfileRepository,
        session_repo: CoachSessionRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize log session handler with dependencies.

        Args:
            client_repo: Client profiles (ownership, schedule bookkeeping).
            session_repo: Coach sessions.
            event_bus: Event bus for SessionSummaryPosted.
            logger: Structured logger.
        """
        self._client_repo = client_repo
        self._session_repo = session_repo
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: LogSession) -> Result[CoachSession, ApplicationError]:
        """Handle log session command.

        Returns:
            Success(CoachSession) once the session and the client's schedule
            are stored, whether or not the notification went out.
            Failure(ApplicationError) if the client is missing or owned by
            another coach.
        """
        client = await self._client_repo.find_by_id(cmd.client_id)
        if client is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=PracticeError.CLIENT_NOT_FOUND,
                )
            )
        if not client.is_owned_by(cmd.coach_id):
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.FORBIDDEN,
                    message=PracticeError.CLIENT_NOT_OWNED,
                )
            )

        session = CoachSession(
            id=uuid7(),
            coach_id=cmd.coach_id,
            client_id=cmd.client_id,
            session_date=cmd.session_date,
            session_number=await self._session_repo.next_session_number(cmd.client_id),
            topic=cmd.topic,
            private_notes=cmd.private_notes,
            shared_summary=cmd.shared_summary,
        )
        await self._session_repo.save(session)

        now = datetime.now(UTC)
        await self._client_repo.record_session_logged(
            cmd.client_id,
            next_session_date=self._next_session_date(client, now),
            logged_at=now,
        )

        if session.has_shared_summary():
            await self._notify_summary_posted(session)

        return Success(value=session)

    def _next_session_date(self, client: ClientProfile, now: datetime) -> datetime | None:
        try:
            schedule = client.schedule
            return schedule.next_occurrence(now) if schedule is not None else None
        except InvalidScheduleError as e:
            self._logger.warning(
                "client_schedule_invalid",
                client_id=str(client.id),
                field=e.field,
                error_message=str(e),
            )
            return None

    async def _notify_summary_posted(self, session: CoachSession) -> None:
        try:
            await self._event_bus.emit(
                NotificationKind.SESSION_SUMMARY_POSTED,
                SessionSummaryPosted(
                    client_id=session.client_id,
                    session_id=session.id,
                    topic=session.topic,
                    shared_summary=session.shared_summary or "",
                ),
            )
        except Exception as e:
            self._logger.error(
                "notification_emit_failed",
                error=e,
                kind=NotificationKind.SESSION_SUMMARY_POSTED.value,
                session_id=str(session.id),
            )
