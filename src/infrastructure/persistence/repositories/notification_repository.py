"""NotificationRepository - SQLAlchemy implementation.

Adapter for hexagonal architecture.
Maps between domain Notification entities and NotificationModel rows.
"""

from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.notification import Notification
from src.domain.enums import NotificationKind
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.notification import (
    Notification as NotificationModel,
)


class NotificationRepository:
    """SQLAlchemy implementation of NotificationRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, notification: Notification) -> None:
        """Create new notification."""
        self.session.add(self._to_model(notification))
        await self.session.commit()

    async def find_by_id(self, notification_id: UUID) -> Notification | None:
        stmt = select(NotificationModel).where(NotificationModel.id == notification_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def list_for_user(
        self,
        user_id: UUID,
        *,
        limit: int,
        offset: int,
        unread_only: bool = False,
    ) -> tuple[list[Notification], int]:
        """Page of notifications (newest first) and the total count.

        Args:
            user_id: Recipient.
            limit: Page size.
            offset: Rows to skip.
            unread_only: Restrict to unread notifications.

        Returns:
            Tuple of (notifications, total).
        """
        conditions = [NotificationModel.user_id == user_id]
        if unread_only:
            conditions.append(NotificationModel.read.is_(False))

        count_stmt = select(func.count()).select_from(NotificationModel).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            select(NotificationModel)
            .where(*conditions)
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()], total

    async def mark_read(self, notification_id: UUID) -> None:
        stmt = (
            update(NotificationModel)
            .where(NotificationModel.id == notification_id)
            .values(read=True)
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def mark_all_read(self, user_id: UUID) -> int:
        """Mark every unread notification of a user read.

        Returns:
            Number of rows updated.
        """
        stmt = (
            update(NotificationModel)
            .where(
                NotificationModel.user_id == user_id,
                NotificationModel.read.is_(False),
            )
            .values(read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount or 0  # type: ignore[attr-defined]

    async def count_unread(self, user_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(NotificationModel)
            .where(
                NotificationModel.user_id == user_id,
                NotificationModel.read.is_(False),
            )
        )
        return (await self.session.execute(stmt)).scalar_one()

    def _to_domain(self, model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            kind=NotificationKind(model.type),
            title=model.title,
            message=model.message,
            created_at=as_utc(model.created_at),  # type: ignore[arg-type]
            read=model.read,
            metadata=dict(model.metadata_ or {}),
        )

    def _to_model(self, notification: Notification) -> NotificationModel:
        return NotificationModel(
            id=notification.id,
            user_id=notification.user_id,
            type=notification.kind.value,
            title=notification.title,
            message=notification.message,
            created_at=as_utc(notification.created_at),
            read=notification.read,
            metadata_=notification.metadata,
        )
