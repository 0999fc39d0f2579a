"""Set client schedule handler.

Flow:
1. Find client profile
2. Verify the acting coach owns it
3. Compute the next session from the weekly slot (invalid input rejected)
4. Store schedule and next session date
5. Return the next session date

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- Repositories are injected via protocols
"""

from datetime import datetime

from src.application.commands.practice_commands import SetClientSchedule
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.errors import InvalidScheduleError, PracticeError
from src.domain.protocols.client_profile_repository import ClientProfileRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects import calculate_next_session_date


class SetClientScheduleHandler:
    """Handler for SetClientSchedule command."""

    def __init__(
        self,
        client_repo: ClientProfileRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._client_repo = client_repo
        self._logger = logger

    async def handle(self, cmd: SetClientSchedule) -> Result[datetime, ApplicationError]:
        """Handle set client schedule command.

        Returns:
            Success(next_session_date) with the UTC start of the next session.
            Failure(ApplicationError) if the client is missing, owned by
            another coach, or the schedule is invalid.
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

        try:
            next_session_date = calculate_next_session_date(
                cmd.day, cmd.time, cmd.timezone
            )
        except InvalidScheduleError as e:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                    message=str(e),
                    domain_error=ValidationError(
                        code=ErrorCode.INVALID_SCHEDULE,
                        message=str(e),
                        field=e.field,
                    ),
                )
            )

        await self._client_repo.update_schedule(
            cmd.client_id,
            day=cmd.day,
            time=cmd.time,
            timezone=cmd.timezone,
            next_session_date=next_session_date,
        )
        self._logger.info(
            "client_schedule_updated",
            client_id=str(cmd.client_id),
            next_session_date=next_session_date.isoformat(),
        )
        return Success(value=next_session_date)
