"""Notification domain error messages.

Used in ``Failure`` results returned by the notification command and query
handlers. These are NOT exceptions.
"""


class NotificationError:
    """Notification error message constants."""

    NOTIFICATION_NOT_FOUND = "Notification not found"
    NOTIFICATION_NOT_OWNED = "Notification belongs to another user"

    INVALID_LIMIT = "limit must be between 1 and 100"
    INVALID_OFFSET = "offset must be zero or greater"
    INVALID_FILTER = "filter must be 'all' or 'unread'"


class PracticeError:
    """Error messages for the coaching operations that produce notifications."""

    CLIENT_NOT_FOUND = "Client not found"
    CLIENT_NOT_OWNED = "Client belongs to another coach"
    COACH_NOT_FOUND = "Coach profile not found"
    EMPTY_RESOURCE_NAME = "Resource name cannot be empty"
