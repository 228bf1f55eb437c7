"""
Book Service

Database operations for the Book resource. Routers call these functions;
the functions know nothing about HTTP.

Lookups return None when a book is missing. Mutations raise
BookNotFoundError instead, which the app's ApiError handler turns into 404.
"""

import logging
import uuid
from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.config import get_settings
from app.exceptions import BookNotFoundError
from app.models import Book
from app.models.book import utcnow
from app.schemas.book import CONTENT_FIELDS, SORTABLE_FIELDS, BookCreate, BookUpdate
from app.utils.pagination import Page, QueryOptions, paginate

logger = logging.getLogger(__name__)


def create_book(db: Session, book_data: BookCreate) -> Book:
    """
    Create a book.

    created_at and updated_at get the same instant. Duplicate titles are
    allowed.

    Args:
        db: Database session
        book_data: Validated book fields

    Returns:
        The persisted book with id and timestamps populated
    """
    now = utcnow()
    book = Book(**book_data.model_dump(), created_at=now, updated_at=now)

    db.add(book)
    db.commit()
    db.refresh(book)

    logger.info(f"Created book {book.id} '{book.title}'")
    return book


def get_book_by_id(db: Session, book_id: uuid.UUID) -> Book | None:
    """Get a book by id, or None if it does not exist."""
    return db.get(Book, book_id)


def get_book_by_title(db: Session, title: str) -> Book | None:
    """
    Get the first book whose title matches exactly.

    When several books share a title the oldest one is returned.
    """
    stmt = (
        select(Book)
        .where(Book.title == title)
        .order_by(Book.created_at.asc(), Book.id.asc())
        .limit(1)
    )
    return db.execute(stmt).scalars().first()


def query_books(
    db: Session,
    filters: Mapping[str, Any],
    options: QueryOptions,
) -> Page[Book]:
    """
    Query for books.

    Args:
        db: Database session
        filters: Book column -> value, exact match (e.g. {"title": "Dune"})
        options: sort_by ("field:asc|desc"), limit (default 10), page (default 1)

    Returns:
        Page of books
    """
    settings = get_settings()
    return paginate(
        db,
        Book,
        filters,
        options,
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
        sort_aliases=SORTABLE_FIELDS,
    )


def update_book_by_id(
    db: Session,
    book_id: uuid.UUID,
    update_data: BookUpdate | Mapping[str, Any],
) -> Book:
    """
    Update a book by id.

    Only fields present in update_data are written; everything else,
    including created_at, is left alone. Only the content fields
    (CONTENT_FIELDS) may be written.

    Raises:
        BookNotFoundError: No book with this id
        ValueError: update_data names a non-content field
    """
    book = get_book_by_id(db, book_id)
    if book is None:
        raise BookNotFoundError()

    if isinstance(update_data, BookUpdate):
        update_data = update_data.model_dump(exclude_unset=True)

    invalid_fields = set(update_data) - set(CONTENT_FIELDS)
    if invalid_fields:
        raise ValueError(f"Cannot update book fields: {sorted(invalid_fields)}")

    for field, value in update_data.items():
        setattr(book, field, value)

    db.commit()
    db.refresh(book)

    logger.info(f"Updated book {book.id} fields={sorted(update_data)}")
    return book


def delete_book_by_id(db: Session, book_id: uuid.UUID) -> Book:
    """
    Delete a book by id.

    Returns:
        The book as it was immediately before deletion (detached)

    Raises:
        BookNotFoundError: No book with this id
    """
    book = get_book_by_id(db, book_id)
    if book is None:
        raise BookNotFoundError()

    db.delete(book)
    db.commit()

    logger.info(f"Deleted book {book_id}")
    return book
