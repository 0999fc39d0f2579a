"""CoachSessionRepository - SQLAlchemy implementation."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.coach_session import CoachSession
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.coach_session import (
    CoachSession as CoachSessionModel,
)


class CoachSessionRepository:
    """SQLAlchemy implementation of CoachSessionRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, session_id: UUID) -> CoachSession | None:
        stmt = select(CoachSessionModel).where(CoachSessionModel.id == session_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return CoachSession(
            id=model.id,
            coach_id=model.coach_id,
            client_id=model.client_id,
            session_date=as_utc(model.session_date),  # type: ignore[arg-type]
            session_number=model.session_number,
            topic=model.topic,
            private_notes=model.private_notes,
            shared_summary=model.shared_summary,
        )

    async def next_session_number(self, client_id: UUID) -> int:
        """One more than the client's highest session number (1 if none)."""
        stmt = select(func.max(CoachSessionModel.session_number)).where(
            CoachSessionModel.client_id == client_id
        )
        result = await self.session.execute(stmt)
        last = result.scalar_one_or_none()
        return (last or 0) + 1

    async def save(self, session: CoachSession) -> None:
        self.session.add(
            CoachSessionModel(
                id=session.id,
                coach_id=session.coach_id,
                client_id=session.client_id,
                session_date=as_utc(session.session_date),
                session_number=session.session_number,
                topic=session.topic,
                private_notes=session.private_notes,
                shared_summary=session.shared_summary,
            )
        )
        await self.session.commit()
