"""User database model.

Only the fields the notification pipeline reads are mapped here; account
management lives outside this service.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User account (notification recipient or coach).

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at / updated_at: Timestamps (from BaseMutableModel)
        email: Unique email address
        username: Optional display name used in email greetings
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique)",
    )

    username: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
        comment="Display name used in greetings",
    )
