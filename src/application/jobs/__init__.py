"""Scheduled application jobs."""

from src.application.jobs.session_reminder_job import (
    ReminderRunSummary,
    SessionReminderJob,
)

__all__ = ["ReminderRunSummary", "SessionReminderJob"]
