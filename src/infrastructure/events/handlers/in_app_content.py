"""In-app notification content per kind.

Pure functions returning the title, message and metadata stored on a
Notification row.
"""

from dataclasses import dataclass, field
from typing import Any

from src.domain.events import ResourceShared, SessionReminder, SessionSummaryPosted


@dataclass(frozen=True, slots=True)
class InAppContent:
    title: str
    message: str
    metadata: dict[str, Any] = field(default_factory=dict)


def session_reminder_content(event: SessionReminder, coach_name: str) -> InAppContent:
    return InAppContent(
        title="Upcoming Session",
        message=f"Your session with {coach_name} is scheduled for tomorrow",
        metadata={
            "client_id": str(event.client_id),
            "session_date": event.session_date.isoformat(),
            "coach_name": coach_name,
        },
    )


def session_summary_posted_content(
    event: SessionSummaryPosted, coach_name: str
) -> InAppContent:
    return InAppContent(
        title="Session Summary",
        message=f"{coach_name} has posted your session summary",
        metadata={
            "client_id": str(event.client_id),
            "session_id": str(event.session_id),
            "topic": event.topic,
            "coach_name": coach_name,
        },
    )


def resource_shared_content(event: ResourceShared, coach_name: str) -> InAppContent:
    return InAppContent(
        title="New Resource",
        message=f'{coach_name} shared "{event.resource_name}" with you',
        metadata={
            "client_id": str(event.client_id),
            "resource_id": str(event.resource_id),
            "resource_name": event.resource_name,
            "coach_name": coach_name,
        },
    )
