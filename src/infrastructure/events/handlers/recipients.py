"""Lookups shared by the notification delivery handlers.

Each helper works on an open session so a handler resolves its recipient,
checks preferences and resolves names inside one transaction.
"""

from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import DEFAULT_COACH_NAME, ClientProfile, User
from src.domain.enums import NotificationChannel, NotificationKind
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.persistence.repositories import (
    ClientProfileRepository,
    CoachProfileRepository,
    NotificationPreferencesRepository,
    UserRepository,
)


@dataclass(frozen=True, slots=True)
class Recipient:
    """Client profile and the user account notifications go to."""

    client: ClientProfile
    user: User


async def resolve_recipient(
    session: AsyncSession,
    client_id: UUID,
    *,
    logger: LoggerProtocol,
    channel: NotificationChannel,
    kind: NotificationKind,
) -> Recipient | None:
    """Client profile and linked user for ``client_id``.

    Logs a warning and returns None when nobody can receive the
    notification. The ``reason`` field of the warning says why.
    """
    client = await ClientProfileRepository(session).find_by_id(client_id)
    if client is None or not client.can_receive_notifications():
        if client is None:
            reason = "no_client"
        elif client.user_id is None:
            reason = "no_linked_user"
        else:
            reason = "client_deleted"
        logger.warning(
            "notification_recipient_missing",
            channel=channel.value,
            kind=kind.value,
            client_id=str(client_id),
            reason=reason,
        )
        return None

    user = await UserRepository(session).find_by_id(client.user_id)  # type: ignore[arg-type]
    if user is None:
        logger.warning(
            "notification_recipient_missing",
            channel=channel.value,
            kind=kind.value,
            client_id=str(client_id),
            reason="user_not_found",
        )
        return None

    return Recipient(client=client, user=user)


async def is_channel_enabled(
    session: AsyncSession,
    user_id: UUID,
    channel: NotificationChannel,
    kind: NotificationKind,
) -> bool:
    """Whether the user allows ``kind`` on ``channel``.

    Creates the all-enabled preference record when the user has none.
    """
    preferences = await NotificationPreferencesRepository(session).get_or_create(
        user_id
    )
    return preferences.is_enabled(channel, kind)


async def resolve_coach_name(
    session: AsyncSession, coach_name: str | None, coach_id: UUID
) -> str:
    """Coach name from the event, else from the coach profile."""
    if coach_name:
        return coach_name
    coach = await CoachProfileRepository(session).find_by_id(coach_id)
    return coach.display_name if coach is not None else DEFAULT_COACH_NAME
