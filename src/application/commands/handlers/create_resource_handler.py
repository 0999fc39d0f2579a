"""Create resource handler.

Flow:
1. Validate the name and find the coach
2. Store the resource
3. Emit ResourceShared once per active (non-deleted) client of the coach
4. Return the resource and the number of clients notified

Each emission is isolated: a failure for one client is logged and the
remaining clients are still notified. A failure listing the clients is
logged too; the resource stays created either way.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.practice_commands import CreateResource
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import Resource
from src.domain.enums import NotificationKind
from src.domain.errors import PracticeError
from src.domain.events import ResourceShared
from src.domain.protocols.client_profile_repository import ClientProfileRepository
from src.domain.protocols.coach_profile_repository import CoachProfileRepository
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.resource_repository import ResourceRepository


@dataclass(frozen=True, kw_only=True)
class SharedResource:
    """Outcome of CreateResource.

    Attributes:
        resource: The stored resource.
        notified_clients: Clients for which ResourceShared was emitted.
    """

    resource: Resource
    notified_clients: int


class CreateResourceHandler:
    """Handler for CreateResource command."""

    def __init__(
        self,
        resource_repo: ResourceRepository,
        client_repo: ClientProfileRepository,
        coach_repo: CoachProfileRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._resource_repo = resource_repo
        self._client_repo = client_repo
        self._coach_repo = coach_repo
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: CreateResource) -> Result[SharedResource, ApplicationError]:
        """Handle create resource command.

        Returns:
            Success(SharedResource) once the resource is stored.
            Failure(ApplicationError) on empty name or unknown coach.
        """
        name = cmd.name.strip()
        if not name:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                    message=PracticeError.EMPTY_RESOURCE_NAME,
                    domain_error=ValidationError(
                        code=ErrorCode.VALIDATION_FAILED,
                        message=PracticeError.EMPTY_RESOURCE_NAME,
                        field="name",
                    ),
                )
            )

        coach = await self._coach_repo.find_by_id(cmd.coach_id)
        if coach is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=PracticeError.COACH_NOT_FOUND,
                )
            )

        resource = Resource(
            id=uuid7(),
            coach_id=coach.id,
            name=name,
            file_type=cmd.file_type,
            description=cmd.description,
            created_at=datetime.now(UTC),
        )
        await self._resource_repo.save(resource)

        notified = await self._share_with_clients(resource, coach.display_name)
        return Success(value=SharedResource(resource=resource, notified_clients=notified))

    async def _share_with_clients(self, resource: Resource, coach_name: str) -> int:
        try:
            clients = await self._client_repo.list_active_by_coach(resource.coach_id)
        except Exception as e:
            self._logger.error(
                "resource_share_clients_lookup_failed",
                error=e,
                resource_id=str(resource.id),
                coach_id=str(resource.coach_id),
            )
            return 0

        notified = 0
        for client in clients:
            try:
                await self._event_bus.emit(
                    NotificationKind.RESOURCE_SHARED,
                    ResourceShared(
                        client_id=client.id,
                        resource_id=resource.id,
                        resource_name=resource.name,
                        coach_name=coach_name,
                    ),
                )
                notified += 1
            except Exception as e:
                self._logger.error(
                    "notification_emit_failed",
                    error=e,
                    kind=NotificationKind.RESOURCE_SHARED.value,
                    resource_id=str(resource.id),
                    client_id=str(client.id),
                )

        self._logger.info(
            "resource_shared",
            resource_id=str(resource.id),
            client_count=len(clients),
            notified=notified,
        )
        return notified
