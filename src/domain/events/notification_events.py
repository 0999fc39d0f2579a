"""Notification events.

One frozen dataclass per ``NotificationKind``. Each class pins its kind in a
``kind`` class variable, so the bus can route ``publish(event)`` and reject an
``emit(kind, payload)`` whose payload belongs to a different kind.

Every payload carries ``client_id``; delivery handlers resolve the recipient
user from it.

Producers:
    - SessionReminder: SessionReminderJob (daily scan)
    - SessionSummaryPosted: LogSessionHandler (shared summary attached)
    - ResourceShared: CreateResourceHandler (once per active client)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar
from uuid import UUID

from src.domain.enums import NotificationKind
from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class SessionReminder(DomainEvent):
    """A client's scheduled session starts within the reminder window.

    Attributes:
        client_id: Client profile the session belongs to.
        session_date: Absolute (timezone-aware) start of the session.
        coach_name: Display name of the coach, if the producer resolved one.
    """

    kind: ClassVar[NotificationKind] = NotificationKind.SESSION_REMINDER

    client_id: UUID
    session_date: datetime
    coach_name: str | None = None


@dataclass(frozen=True, kw_only=True, slots=True)
class SessionSummaryPosted(DomainEvent):
    """A coach logged a session with a summary the client may read.

    Attributes:
        client_id: Client profile the session belongs to.
        session_id: The logged coach session.
        shared_summary: Client-visible summary text.
        topic: Optional session topic.
    """

    kind: ClassVar[NotificationKind] = NotificationKind.SESSION_SUMMARY_POSTED

    client_id: UUID
    session_id: UUID
    shared_summary: str
    topic: str | None = None


@dataclass(frozen=True, kw_only=True, slots=True)
class ResourceShared(DomainEvent):
    """A coach made a resource available to a client.

    Attributes:
        client_id: Receiving client profile.
        resource_id: The shared resource.
        resource_name: Resource display name at the time of sharing.
        coach_name: Display name of the coach, if the producer resolved one.
    """

    kind: ClassVar[NotificationKind] = NotificationKind.RESOURCE_SHARED

    client_id: UUID
    resource_id: UUID
    resource_name: str
    coach_name: str | None = None


type NotificationEvent = SessionReminder | SessionSummaryPosted | ResourceShared
