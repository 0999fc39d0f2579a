"""Domain-level error codes (machine-readable).

Codes follow the ENTITY_REASON naming convention and are carried by
``DomainError`` values inside ``Failure`` results.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_SCHEDULE = "invalid_schedule"
    INVALID_PAGINATION = "invalid_pagination"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    CLIENT_NOT_FOUND = "client_not_found"
    COACH_NOT_FOUND = "coach_not_found"
    NOTIFICATION_NOT_FOUND = "notification_not_found"

    # Authorization errors
    RESOURCE_NOT_OWNED = "resource_not_owned"
