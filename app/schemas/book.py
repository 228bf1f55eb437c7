"""
Book Pydantic Schemas

Request validation and response shaping for /books:
- BookCreate: all five content fields required
- BookUpdate: any non-empty subset of the content fields
- BookResponse: API-safe view of a Book row
- BookListResponse: the page envelope returned by GET /books

Timestamps and page metadata are emitted in camelCase (createdAt,
totalPages, ...). Validation accepts either spelling, which lets FastAPI
re-validate a response it has already dumped by alias.
"""

import re
import uuid
from datetime import datetime

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

# API-visible sort keys mapped to Book columns
SORTABLE_FIELDS: dict[str, str] = {
    "title": "title",
    "publication_year": "publication_year",
    "author": "author",
    "description": "description",
    "publisher": "publisher",
    "createdAt": "created_at",
    "created_at": "created_at",
    "updatedAt": "updated_at",
    "updated_at": "updated_at",
}

_SORT_FIELD = "|".join(re.escape(name) for name in SORTABLE_FIELDS)
SORT_BY_PATTERN = rf"^({_SORT_FIELD})(:(asc|desc))?(,({_SORT_FIELD})(:(asc|desc))?)*$"

CONTENT_FIELDS = ("title", "publication_year", "author", "description", "publisher")


class BookCreate(BaseModel):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "Seni Bersikap Bodo Amat",
        "publication_year": "12 Januari 1994",
        "author": "Mark Manson",
        "description": "A counterintuitive approach to living a good life",
        "publisher": "Airlangga"
    }
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["Seni Bersikap Bodo Amat"],
    )

    publication_year: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Publication year or date, free-form text",
        examples=["1994", "12 Januari 1994"],
    )

    author: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author name",
        examples=["Mark Manson"],
    )

    description: str = Field(
        ...,
        min_length=1,
        description="Book description or summary",
    )

    publisher: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Publisher name",
        examples=["Airlangga"],
    )

    model_config = ConfigDict(extra="forbid")


class BookUpdate(BaseModel):
    """
    Schema for PATCH /books/{bookId}.

    Only fields present in the request body are applied. Explicit nulls are
    rejected because every stored Book keeps all five content fields.
    """

    title: str | None = Field(default=None, min_length=1, max_length=500)
    publication_year: str | None = Field(default=None, min_length=1, max_length=100)
    author: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    publisher: str | None = Field(default=None, min_length=1, max_length=255)

    model_config = ConfigDict(extra="forbid")

    @field_validator(*CONTENT_FIELDS)
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Field may not be null")
        return v

    @model_validator(mode="after")
    def require_one_field(self) -> "BookUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        return self


class BookResponse(BaseModel):
    """API representation of a Book."""

    id: uuid.UUID = Field(..., description="Unique identifier")
    title: str
    publication_year: str
    author: str
    description: str
    publisher: str
    created_at: datetime = Field(
        ...,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
        description="When the book was created",
    )
    updated_at: datetime = Field(
        ...,
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
        description="When the book was last updated",
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "4f1c1a8e-2f4b-4a47-9d5e-3f3b1f7e2a10",
                "title": "Seni Bersikap Bodo Amat",
                "publication_year": "12 Januari 1994",
                "author": "Mark Manson",
                "description": "A counterintuitive approach to living a good life",
                "publisher": "Airlangga",
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z",
            }
        },
    )


class BookListResponse(BaseModel):
    """
    Page envelope for GET /books.

    - results: Books on this page
    - page: Current page number (1-indexed)
    - limit: Maximum number of results per page
    - totalPages: ceil(totalResults / limit)
    - totalResults: Number of books matching the filter
    """

    results: list[BookResponse] = Field(..., description="Books on this page")
    page: int = Field(..., ge=1, description="Current page number")
    limit: int = Field(..., ge=1, description="Results per page")
    total_pages: int = Field(
        ...,
        ge=0,
        validation_alias=AliasChoices("total_pages", "totalPages"),
        serialization_alias="totalPages",
    )
    total_results: int = Field(
        ...,
        ge=0,
        validation_alias=AliasChoices("total_results", "totalResults"),
        serialization_alias="totalResults",
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "results": [],
                "page": 1,
                "limit": 10,
                "totalPages": 1,
                "totalResults": 1,
            }
        },
    )
