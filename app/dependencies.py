"""
FastAPI Dependencies Module

Reusable components injected into route handlers:
- DbSession: per-request database session
- get_current_user: bearer-token authentication
- require_rights: role-based authorization
- BookQuery: validated filter/sort/paging parameters for GET /books
"""

import logging
from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.database import get_db
from app.models import User
from app.roles import get_rights_for_role
from app.schemas.book import SORT_BY_PATTERN
from app.services.security import verify_token_type
from app.utils.pagination import QueryOptions

logger = logging.getLogger(__name__)

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Authentication
# =============================================================================
# auto_error=False so a missing header produces our own 401 instead of the
# scheme's default response.
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    db: DbSession,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> User:
    """
    Resolve the caller from the Authorization: Bearer <token> header.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired, or
            the user does not exist or is inactive
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Please authenticate",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    payload = verify_token_type(credentials.credentials, "access")
    if payload is None:
        raise credentials_exception

    user_id = payload.get("sub")
    try:
        user = db.get(User, int(user_id))
    except (TypeError, ValueError):
        logger.warning(f"Token with malformed subject: {user_id!r}")
        raise credentials_exception

    if user is None or not user.is_active:
        raise credentials_exception

    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


# =============================================================================
# Authorization
# =============================================================================
def require_rights(*required_rights: str) -> Callable[..., User]:
    """
    Build a dependency that admits callers holding ANY of required_rights.

    With no rights given, any authenticated user is admitted.

    Usage:
        @router.post("", dependencies=[Depends(require_rights("manageBooks"))])
    """

    def check_rights(current_user: CurrentUser) -> User:
        if not required_rights:
            return current_user

        user_rights = get_rights_for_role(current_user.role)
        if user_rights.isdisjoint(required_rights):
            logger.warning(
                f"User {current_user.id} (role={current_user.role}) "
                f"lacks any of {list(required_rights)}"
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Forbidden",
            )
        return current_user

    return check_rights


# =============================================================================
# Book List Parameters
# =============================================================================
class BookQueryParams:
    """
    Filter, sort and paging parameters for GET /books.

    Usage:
        GET /api/v1/books?title=Dune&sortBy=createdAt:desc&limit=20&page=2
    """

    def __init__(
        self,
        title: str | None = Query(
            default=None,
            min_length=1,
            description="Exact title to match",
            examples=["Seni Bersikap Bodo Amat"],
        ),
        sort_by: str | None = Query(
            default=None,
            alias="sortBy",
            pattern=SORT_BY_PATTERN,
            description="Sort in the form field:asc|desc, comma-separated for several keys",
            examples=["title:asc", "createdAt:desc"],
        ),
        limit: int | None = Query(
            default=None,
            description="Maximum number of books per page (default 10)",
            examples=[10],
        ),
        page: int | None = Query(
            default=None,
            description="Page number, 1-indexed (default 1)",
            examples=[1],
        ),
    ) -> None:
        self.title = title
        self.sort_by = sort_by
        self.limit = limit
        self.page = page

    @property
    def filters(self) -> dict[str, str]:
        """Column filters with unset parameters left out."""
        return {"title": self.title} if self.title is not None else {}

    @property
    def options(self) -> QueryOptions:
        return QueryOptions(sort_by=self.sort_by, limit=self.limit, page=self.page)


BookQuery = Annotated[BookQueryParams, Depends()]
