"""Notification email rendering.

Pure functions turning notification data into an ``EmailMessage``. HTML
bodies come from Jinja2 templates in ``templates/`` with autoescaping on,
so coach-supplied text (names, summaries, descriptions) is always escaped.
Subjects and plain-text bodies are built here.

Usage:
    message = render_session_reminder(
        to="client@example.com",
        client_name="Sam",
        coach_name="jane",
        session_start=local_start,
        app_url="https://app.loom.local/client/sessions",
    )
"""

from datetime import datetime
from functools import lru_cache

from jinja2 import Environment, PackageLoader, select_autoescape

from src.domain.protocols.email_protocol import EmailMessage

SUMMARY_PREVIEW_LENGTH = 300


@lru_cache
def _environment() -> Environment:
    return Environment(
        loader=PackageLoader("src.infrastructure.email", "templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def format_day(value: datetime, *, with_year: bool = False) -> str:
    """Long date such as ``Monday, March 11`` (``, 2024`` with year)."""
    text = f"{value:%A}, {value:%B} {value.day}"
    if with_year:
        text += f", {value.year}"
    return text


def format_time_label(value: datetime) -> str:
    """Clock time with zone abbreviation, e.g. ``2:00 PM EDT``."""
    hour = value.hour % 12 or 12
    label = f"{hour}:{value:%M} {'AM' if value.hour < 12 else 'PM'}"
    zone = value.tzname()
    return f"{label} {zone}" if zone else label


def truncate_summary(summary: str, limit: int = SUMMARY_PREVIEW_LENGTH) -> str:
    if len(summary) <= limit:
        return summary
    return summary[:limit] + "..."


def render_session_reminder(
    *,
    to: str,
    client_name: str,
    coach_name: str,
    session_start: datetime,
    app_url: str,
    app_name: str = "Loom",
    include_time: bool = True,
) -> EmailMessage:
    """Reminder email for a session starting tomorrow.

    Args:
        to: Recipient address.
        client_name: Greeting name.
        coach_name: Coach display name.
        session_start: Session start, already in the client's timezone.
        app_url: Link target for the call to action.
        app_name: Product name used in the footer.
        include_time: Show the clock time (off when the client's timezone
            is unknown and the time would be misleading).
    """
    formatted_date = format_day(session_start)
    time_label = format_time_label(session_start) if include_time else None

    html = _environment().get_template("session_reminder.html").render(
        client_name=client_name,
        coach_name=coach_name,
        formatted_date=formatted_date,
        time_label=time_label,
        app_url=app_url,
        app_name=app_name,
    )
    text = (
        f"Session Reminder: You have a coaching session scheduled with "
        f"{coach_name} on {formatted_date}"
        f"{f' at {time_label}' if time_label else ''}."
    )
    return EmailMessage(
        to=to,
        subject=f"Reminder: Your session with {coach_name} is tomorrow",
        text=text,
        html=html,
    )


def render_session_summary_posted(
    *,
    to: str,
    client_name: str,
    coach_name: str,
    session_date: datetime,
    summary: str,
    app_url: str,
    topic: str | None = None,
    app_name: str = "Loom",
) -> EmailMessage:
    """Email announcing a newly posted session summary.

    The summary is cut to its first 300 characters (plus ``...``).
    """
    formatted_date = format_day(session_date, with_year=True)

    html = _environment().get_template("session_summary_posted.html").render(
        client_name=client_name,
        coach_name=coach_name,
        formatted_date=formatted_date,
        topic=topic,
        summary=truncate_summary(summary),
        app_url=app_url,
        app_name=app_name,
    )
    return EmailMessage(
        to=to,
        subject=f"{coach_name} posted your session summary",
        text=(
            f"Session Summary: {coach_name} has posted a summary of your "
            f"session from {formatted_date}."
        ),
        html=html,
    )


def render_resource_shared(
    *,
    to: str,
    client_name: str,
    coach_name: str,
    resource_name: str,
    app_url: str,
    resource_description: str | None = None,
    app_name: str = "Loom",
) -> EmailMessage:
    """Email announcing a resource shared by the coach."""
    html = _environment().get_template("resource_shared.html").render(
        client_name=client_name,
        coach_name=coach_name,
        resource_name=resource_name,
        resource_description=resource_description,
        app_url=app_url,
        app_name=app_name,
    )
    return EmailMessage(
        to=to,
        subject=f"{coach_name} shared a new resource with you",
        text=f'New Resource: {coach_name} has shared "{resource_name}" with you.',
        html=html,
    )
