"""Coach profile database model."""

from uuid import UUID

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel
from src.infrastructure.persistence.models.user import User


class CoachProfile(BaseMutableModel):
    """Coach profile linked to the coach's user account.

    Relationships:
        - user: Many-to-one, loaded eagerly for display name resolution
    """

    __tablename__ = "coach_profiles"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        comment="Coach's user account",
    )

    user: Mapped[User] = relationship(lazy="joined")
