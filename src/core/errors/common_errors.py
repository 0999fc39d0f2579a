"""Generic error classes shared by every layer.

Error Types:
- ValidationError: rejected input (bad schedule, bad pagination)
- NotFoundError: referenced record does not exist
- AuthorizationError: record exists but belongs to someone else

Usage:
    return Failure(error=NotFoundError(
        code=ErrorCode.NOTIFICATION_NOT_FOUND,
        message="Notification not found",
        resource_type="Notification",
        resource_id=str(notification_id),
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Name of the offending input, when known.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Referenced record does not exist.

    Attributes:
        resource_type: Kind of record (Notification, ClientProfile, ...).
        resource_id: Identifier that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Caller does not own the record it tried to act on."""

    required_permission: str | None = None
