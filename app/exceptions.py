"""
Domain Errors

Services raise these instead of HTTPException so they stay usable outside a
request. The handler registered in app.main serializes any ApiError as
{"detail": message} with its status code.
"""

from fastapi import status


class ApiError(Exception):
    """Base error carrying an HTTP status code and a client-facing message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "An internal error occurred."

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class BookNotFoundError(NotFoundError):
    message = "Book not found"
