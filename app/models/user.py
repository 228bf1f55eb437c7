"""
User Model

Callers of the Books Service. A user's role decides which rights they hold
(see app.roles); the bearer token only identifies the user.

Users are provisioned out of band (seed script, migrations, an identity
service). This service never creates them over HTTP.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.book import utcnow


class User(Base):
    """
    User model.

    Table: users

    Indexes:
    - Primary key on id (automatic)
    - email: Unique index for lookups

    Example:
        user = User(email="admin@example.com", name="Admin", role="admin")
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="User's email address"
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name"
    )

    role: Mapped[str] = mapped_column(
        String(20),
        default="user",
        nullable=False,
        comment="Role name, mapped to rights in app.roles"
    )

    # Inactive users are treated as unauthenticated
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
        comment="Whether the account can call the API"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation."""
        return f"User(id={self.id}, email='{self.email}', role='{self.role}')"
