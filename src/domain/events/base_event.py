"""Base domain event class.

Domain events are immutable records of something that already happened
(past tense: SessionSummaryPosted, ResourceShared). Producers publish them
after their own write has succeeded.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated time-ordered event_id (UUIDv7)
    - occurred_at timestamp (UTC)

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    ... class ClientArchived(DomainEvent):
    ...     client_id: UUID
    >>>
    >>> event = ClientArchived(client_id=uuid7())
    >>> event.event_id  # auto-generated
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    Attributes:
        event_id: Unique identifier for this event instance. UUIDv7, so ids
            sort by creation time. Logged by the event bus on handler failure.
        occurred_at: When the event occurred (UTC). Handlers convert to the
            recipient's timezone for display.
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
