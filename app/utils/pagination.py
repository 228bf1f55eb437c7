"""
Pagination Helper

Generic filter/sort/paginate over any SQLAlchemy model, used by every list
service. Produces a Page that maps directly onto a list response schema.

sortBy syntax:
    "field"                  ascending
    "field:desc"             descending
    "title:asc,createdAt:desc"  multiple keys, applied left to right

Usage:
    page = paginate(
        db,
        Book,
        filters={"title": "Dune"},
        options=QueryOptions(sort_by="createdAt:desc", limit=20, page=2),
    )
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

ModelT = TypeVar("ModelT")

DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1
DEFAULT_SORT_COLUMN = "created_at"


@dataclass
class QueryOptions:
    """Sorting and paging options for a list query."""

    sort_by: str | None = None
    limit: int | None = None
    page: int | None = None


@dataclass
class Page(Generic[ModelT]):
    """One page of results plus the metadata describing the full result set."""

    results: list[ModelT] = field(default_factory=list)
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    total_pages: int = 0
    total_results: int = 0


def _column(model: type, name: str, aliases: Mapping[str, str] | None):
    column_name = aliases.get(name, name) if aliases else name
    column = model.__table__.columns.get(column_name)
    if column is None:
        raise ValueError(f"{model.__name__} has no field '{name}'")
    return getattr(model, column.key)


def parse_sort_by(
    model: type,
    sort_by: str | None,
    aliases: Mapping[str, str] | None = None,
) -> list:
    """
    Turn a sortBy string into ORDER BY clauses.

    Falls back to created_at ascending when sort_by is empty. The primary key
    is always appended so rows with equal sort keys keep a fixed order.

    Raises:
        ValueError: Unknown field or direction
    """
    clauses = []
    if sort_by:
        for part in sort_by.split(","):
            name, _, direction = part.strip().partition(":")
            direction = direction.lower() or "asc"
            if direction not in ("asc", "desc"):
                raise ValueError(f"Invalid sort direction '{direction}'")
            column = _column(model, name, aliases)
            clauses.append(column.desc() if direction == "desc" else column.asc())
    elif DEFAULT_SORT_COLUMN in model.__table__.columns:
        clauses.append(getattr(model, DEFAULT_SORT_COLUMN).asc())

    for pk_column in model.__table__.primary_key.columns:
        clauses.append(getattr(model, pk_column.key).asc())
    return clauses


def paginate(
    db: Session,
    model: type[ModelT],
    filters: Mapping[str, Any] | None = None,
    options: QueryOptions | None = None,
    *,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int | None = None,
    sort_aliases: Mapping[str, str] | None = None,
) -> Page[ModelT]:
    """
    Run a filtered, sorted, paginated query.

    Args:
        db: Database session
        model: Mapped class to query
        filters: Column name -> value equality filters; None values are skipped
        options: sort_by / limit / page
        default_limit: Limit used when options.limit is missing or not positive
        max_limit: Optional upper bound applied to the limit
        sort_aliases: API field names mapped to column names for sort_by

    Returns:
        Page with results and totals
    """
    options = options or QueryOptions()

    limit = options.limit if options.limit and options.limit > 0 else default_limit
    if max_limit is not None:
        limit = min(limit, max_limit)
    page = options.page if options.page and options.page > 0 else DEFAULT_PAGE

    stmt = select(model)
    for name, value in (filters or {}).items():
        if value is None:
            continue
        stmt = stmt.where(_column(model, name, None) == value)

    count_stmt = select(func.count()).select_from(stmt.subquery())
    total_results = db.execute(count_stmt).scalar() or 0

    order_by = parse_sort_by(model, options.sort_by, sort_aliases)
    offset = (page - 1) * limit

    # Pages past the end are empty; the offset may not fit a database integer
    results = []
    if offset < total_results:
        stmt = stmt.order_by(*order_by).offset(offset).limit(limit)
        results = list(db.execute(stmt).scalars().all())

    return Page(
        results=results,
        page=page,
        limit=limit,
        total_pages=math.ceil(total_results / limit),
        total_results=total_results,
    )
