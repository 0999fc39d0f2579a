"""Coach profile domain entity."""

from dataclasses import dataclass
from uuid import UUID

DEFAULT_COACH_NAME = "Your Coach"


@dataclass
class CoachProfile:
    """Coach owning clients, sessions and resources.

    Attributes:
        id: Coach profile identifier.
        user_id: User account of the coach.
        email: Email of the coach's user account, if loaded.
    """

    id: UUID
    user_id: UUID
    email: str | None = None

    @property
    def display_name(self) -> str:
        """Name shown to clients.

        The local part of the coach's email address, or ``"Your Coach"``
        when no usable address is known.

        Example:
            >>> CoachProfile(id=..., user_id=..., email="jane.doe@example.com").display_name
            'jane.doe'
        """
        if not self.email:
            return DEFAULT_COACH_NAME
        local_part = self.email.split("@", 1)[0]
        return local_part or DEFAULT_COACH_NAME
