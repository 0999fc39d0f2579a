"""Client profile types."""

from enum import Enum


class ClientType(str, Enum):
    """How a client relates to a user account.

    Only REGISTERED clients have a linked user and can receive notifications.
    """

    REGISTERED = "registered"
    """Client signed up and has a user account."""

    OFFLINE = "offline"
    """Client managed by the coach only, no account."""

    INVITED = "invited"
    """Invitation sent, account not yet created."""
