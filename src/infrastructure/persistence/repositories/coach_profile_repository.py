"""CoachProfileRepository - SQLAlchemy implementation."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.coach_profile import CoachProfile
from src.infrastructure.persistence.models.coach_profile import (
    CoachProfile as CoachProfileModel,
)


class CoachProfileRepository:
    """SQLAlchemy implementation of CoachProfileRepository protocol.

    The coach's user row is joined eagerly so ``display_name`` can be derived
    from the email without a second query.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, coach_id: UUID) -> CoachProfile | None:
        stmt = select(CoachProfileModel).where(CoachProfileModel.id == coach_id)
        result = await self.session.execute(stmt)
        coach_model = result.scalar_one_or_none()

        if coach_model is None:
            return None

        return CoachProfile(
            id=coach_model.id,
            user_id=coach_model.user_id,
            email=coach_model.user.email if coach_model.user else None,
        )

    async def save(self, coach: CoachProfile) -> None:
        self.session.add(CoachProfileModel(id=coach.id, user_id=coach.user_id))
        await self.session.commit()
