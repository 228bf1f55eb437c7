"""
Book Model

The single resource managed by the Books Service.

publication_year is stored as text, not as an integer or date: catalog
entries such as "12 Januari 1994" or "c. 1600" must round-trip unchanged.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def utcnow() -> datetime:
    """Timezone-aware current time used for record timestamps."""
    return datetime.now(timezone.utc)


class Book(Base):
    """
    Book model.

    Table: books

    Fields:
    - id: UUID assigned at creation, never changes
    - title: Book title (indexed for exact-match lookups)
    - publication_year: Free-form publication date text
    - author: Author name
    - description: Summary of the book
    - publisher: Publisher name

    All five content fields are NOT NULL.

    Example:
        book = Book(
            title="Seni Bersikap Bodo Amat",
            publication_year="12 Januari 1994",
            author="Mark Manson",
            description="A counterintuitive approach to living a good life",
            publisher="Airlangga",
        )
    """

    __tablename__ = "books"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # -------------------------------------------------------------------------
    # Content Fields
    # -------------------------------------------------------------------------
    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    publication_year: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Publication year or date as entered"
    )

    author: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Author name"
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Book description or summary"
    )

    publisher: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Publisher name"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    # Python-side defaults keep microsecond precision on every backend, so
    # updated_at moves forward even for two writes within the same second.
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
        return f"Book(id={self.id}, title='{self.title}', author='{self.author}')"
