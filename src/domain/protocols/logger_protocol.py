"""LoggerProtocol definition for structured logging.

Every log call is an event name plus key-value context. Implementations
must keep output structured and must not log secrets (SMTP passwords) or
message bodies.

Log Levels:
    - DEBUG: dispatch details (handler counts, skipped deliveries)
    - INFO: deliveries and job runs
    - WARNING: nothing to deliver (missing user, missing session record)
    - ERROR: a delivery or producer step failed, processing continues
    - CRITICAL: the reminder job could not run at all

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("session_reminder_email_sent", user_id=str(user.id))
    job_logger = logger.bind(job="session_reminders")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: snake_case event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: snake_case event name.
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for failures that stop a whole run."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
