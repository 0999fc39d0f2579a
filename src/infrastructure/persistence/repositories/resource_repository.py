"""ResourceRepository - SQLAlchemy implementation."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.resource import Resource
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.resource import (
    Resource as ResourceModel,
)


class ResourceRepository:
    """SQLAlchemy implementation of ResourceRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, resource_id: UUID) -> Resource | None:
        stmt = select(ResourceModel).where(ResourceModel.id == resource_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return Resource(
            id=model.id,
            coach_id=model.coach_id,
            name=model.name,
            file_type=model.file_type,
            description=model.description,
            created_at=as_utc(model.created_at),  # type: ignore[arg-type]
        )

    async def save(self, resource: Resource) -> None:
        self.session.add(
            ResourceModel(
                id=resource.id,
                coach_id=resource.coach_id,
                name=resource.name,
                file_type=resource.file_type,
                description=resource.description,
                created_at=as_utc(resource.created_at),
            )
        )
        await self.session.commit()
