"""
Pydantic Schemas Package

Request/response models, kept separate from the SQLAlchemy models so the API
exposes exactly the fields it means to.

Schema Naming Convention:
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields allowed when updating (all optional)
- XxxResponse: Fields returned in API responses
"""

from app.schemas.book import (
    SORTABLE_FIELDS,
    SORT_BY_PATTERN,
    BookCreate,
    BookListResponse,
    BookResponse,
    BookUpdate,
)

__all__ = [
    "SORTABLE_FIELDS",
    "SORT_BY_PATTERN",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookListResponse",
]
