"""
Books Router

CRUD endpoints for books.

Every endpoint runs, in order:
1. Authorization (require_rights), 401/403 on failure
2. Request validation (path, query, body), 400 on failure
3. The book service call
4. Response shaping through BookResponse / BookListResponse

Rights:
- Writes (POST, PATCH, DELETE) need manageBooks.
- Reads (GET) need getUsers OR manageBooks. getUsers belongs to the users
  resource; do not narrow this without product sign-off.
"""

import uuid

from fastapi import APIRouter, Depends, status

from app.dependencies import BookQuery, DbSession, require_rights
from app.exceptions import BookNotFoundError
from app.schemas import BookCreate, BookListResponse, BookResponse, BookUpdate
from app.services import books as book_service

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        400: {"description": "Invalid request"},
        401: {"description": "Please authenticate"},
        403: {"description": "Forbidden"},
    },
)

can_read_books = Depends(require_rights("getUsers", "manageBooks"))
can_manage_books = Depends(require_rights("manageBooks"))


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[can_manage_books],
    summary="Create a book",
    description="Create a book. Requires the manageBooks right.",
)
def create_book(book_data: BookCreate, db: DbSession) -> BookResponse:
    book = book_service.create_book(db, book_data)
    return BookResponse.model_validate(book)


@router.get(
    "",
    response_model=BookListResponse,
    dependencies=[can_read_books],
    summary="List books",
    description="Paginated list of books, optionally filtered by exact title and sorted.",
)
def list_books(query: BookQuery, db: DbSession) -> BookListResponse:
    """
    List books.

    Examples:
        GET /api/v1/books
        GET /api/v1/books?title=Dune
        GET /api/v1/books?sortBy=title:asc,createdAt:desc&limit=5&page=2
    """
    page = book_service.query_books(db, query.filters, query.options)
    return BookListResponse.model_validate(page)


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    dependencies=[can_read_books],
    summary="Get a book",
    responses={404: {"description": "Book not found"}},
)
def get_book(db: DbSession, book_id: uuid.UUID) -> BookResponse:
    book = book_service.get_book_by_id(db, book_id)
    if book is None:
        raise BookNotFoundError()
    return BookResponse.model_validate(book)


@router.patch(
    "/{book_id}",
    response_model=BookResponse,
    dependencies=[can_manage_books],
    summary="Update a book",
    description="Change only the supplied fields. Requires the manageBooks right.",
    responses={404: {"description": "Book not found"}},
)
def update_book(
    book_data: BookUpdate,
    db: DbSession,
    book_id: uuid.UUID,
) -> BookResponse:
    book = book_service.update_book_by_id(db, book_id, book_data)
    return BookResponse.model_validate(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[can_manage_books],
    summary="Delete a book",
    description="Permanently delete a book. Requires the manageBooks right.",
    responses={404: {"description": "Book not found"}},
)
def delete_book(db: DbSession, book_id: uuid.UUID) -> None:
    book_service.delete_book_by_id(db, book_id)
