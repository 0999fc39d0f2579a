"""NotificationPreferencesRepository - SQLAlchemy implementation.

Preferences are created lazily: ``get_or_create`` inserts an all-enabled
row the first time a user's preferences are needed. A concurrent insert for
the same user loses on the unique ``user_id`` constraint and re-reads the
winner's row.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

from src.domain.entities.notification_preferences import (
    PREFERENCE_FIELDS,
    NotificationPreferences,
)
from src.infrastructure.persistence.models.notification_preferences import (
    NotificationPreferences as NotificationPreferencesModel,
)

_SWITCHES = tuple(PREFERENCE_FIELDS.values())


class NotificationPreferencesRepository:
    """SQLAlchemy implementation of NotificationPreferencesRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user_id(self, user_id: UUID) -> NotificationPreferences | None:
        model = await self._find_model(user_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def get_or_create(self, user_id: UUID) -> NotificationPreferences:
        """Stored preferences, inserting defaults (all enabled) if missing."""
        existing = await self.find_by_user_id(user_id)
        if existing is not None:
            return existing

        preferences = NotificationPreferences(id=uuid7(), user_id=user_id)
        self.session.add(self._to_model(preferences))
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raced = await self.find_by_user_id(user_id)
            if raced is None:
                raise
            return raced
        return preferences

    async def update(self, preferences: NotificationPreferences) -> None:
        """Persist all switches of an existing record.

        Raises:
            NoResultFound: If no record exists for the user.
        """
        stmt = select(NotificationPreferencesModel).where(
            NotificationPreferencesModel.id == preferences.id
        )
        model = (await self.session.execute(stmt)).scalar_one()
        for name in _SWITCHES:
            setattr(model, name, getattr(preferences, name))
        await self.session.commit()

    async def _find_model(self, user_id: UUID) -> NotificationPreferencesModel | None:
        stmt = select(NotificationPreferencesModel).where(
            NotificationPreferencesModel.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_domain(self, model: NotificationPreferencesModel) -> NotificationPreferences:
        return NotificationPreferences(
            id=model.id,
            user_id=model.user_id,
            **{name: getattr(model, name) for name in _SWITCHES},
        )

    def _to_model(self, preferences: NotificationPreferences) -> NotificationPreferencesModel:
        return NotificationPreferencesModel(
            id=preferences.id,
            user_id=preferences.user_id,
            **{name: getattr(preferences, name) for name in _SWITCHES},
        )
