"""ClientProfileRepository - SQLAlchemy implementation.

Adapter for hexagonal architecture. Besides plain lookups it owns the two
queries the notification pipeline depends on:

- the reminder window scan (``find_due_for_reminder``)
- the single-statement session bookkeeping (``record_session_logged``)

All datetimes are bound in UTC so range comparisons stay correct on
databases that store them without an offset.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.client_profile import ClientProfile
from src.domain.enums import ClientType
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.client_profile import (
    ClientProfile as ClientProfileModel,
)


class ClientProfileRepository:
    """SQLAlchemy implementation of ClientProfileRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, client_id: UUID) -> ClientProfile | None:
        """Find client profile by ID.

        Returns:
            Domain ClientProfile if found, None otherwise.
        """
        stmt = select(ClientProfileModel).where(ClientProfileModel.id == client_id)
        result = await self.session.execute(stmt)
        client_model = result.scalar_one_or_none()

        if client_model is None:
            return None

        return self._to_domain(client_model)

    async def find_due_for_reminder(
        self, window_start: datetime, window_end: datetime
    ) -> list[ClientProfile]:
        """Clients with a linked user and a session in ``[start, end)``.

        Args:
            window_start: Inclusive lower bound.
            window_end: Exclusive upper bound.

        Returns:
            Matching profiles, earliest session first.
        """
        stmt = (
            select(ClientProfileModel)
            .where(
                ClientProfileModel.next_session_date >= window_start.astimezone(UTC),
                ClientProfileModel.next_session_date < window_end.astimezone(UTC),
                ClientProfileModel.user_id.is_not(None),
            )
            .order_by(ClientProfileModel.next_session_date)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_active_by_coach(self, coach_id: UUID) -> list[ClientProfile]:
        """All clients of a coach that are not soft-deleted."""
        stmt = (
            select(ClientProfileModel)
            .where(
                ClientProfileModel.coach_id == coach_id,
                ClientProfileModel.deleted_at.is_(None),
            )
            .order_by(ClientProfileModel.created_at)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def update_schedule(
        self,
        client_id: UUID,
        *,
        day: int,
        time: str,
        timezone: str,
        next_session_date: datetime,
    ) -> None:
        """Store a recurring schedule and its computed next session."""
        stmt = (
            update(ClientProfileModel)
            .where(ClientProfileModel.id == client_id)
            .values(
                schedule_day=day,
                schedule_time=time,
                schedule_timezone=timezone,
                next_session_date=next_session_date.astimezone(UTC),
            )
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def record_session_logged(
        self,
        client_id: UUID,
        *,
        next_session_date: datetime | None,
        logged_at: datetime,
    ) -> None:
        """Increment the session counter and advance the schedule together.

        Issues one UPDATE; the counter is incremented by the database
        (``session_count = session_count + 1``), never read-modify-written.
        """
        values: dict[str, object] = {
            "session_count": ClientProfileModel.session_count + 1,
            "last_activity_date": logged_at.astimezone(UTC),
        }
        if next_session_date is not None:
            values["next_session_date"] = next_session_date.astimezone(UTC)

        stmt = (
            update(ClientProfileModel)
            .where(ClientProfileModel.id == client_id)
            .values(**values)
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def save(self, client: ClientProfile) -> None:
        self.session.add(self._to_model(client))
        await self.session.commit()

    def _to_domain(self, client_model: ClientProfileModel) -> ClientProfile:
        return ClientProfile(
            id=client_model.id,
            coach_id=client_model.coach_id,
            client_type=ClientType(client_model.client_type),
            user_id=client_model.user_id,
            display_name=client_model.display_name,
            schedule_day=client_model.schedule_day,
            schedule_time=client_model.schedule_time,
            schedule_timezone=client_model.schedule_timezone,
            next_session_date=as_utc(client_model.next_session_date),
            session_count=client_model.session_count,
            last_activity_date=as_utc(client_model.last_activity_date),
            deleted_at=as_utc(client_model.deleted_at),
        )

    def _to_model(self, client: ClientProfile) -> ClientProfileModel:
        return ClientProfileModel(
            id=client.id,
            coach_id=client.coach_id,
            client_type=client.client_type.value,
            user_id=client.user_id,
            display_name=client.display_name,
            schedule_day=client.schedule_day,
            schedule_time=client.schedule_time,
            schedule_timezone=client.schedule_timezone,
            next_session_date=as_utc(client.next_session_date),
            session_count=client.session_count,
            last_activity_date=as_utc(client.last_activity_date),
            deleted_at=as_utc(client.deleted_at),
        )
