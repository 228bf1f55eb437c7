"""
Tests for the generic pagination helper (app.utils.pagination).
"""

import pytest

from app.models import Book, User
from app.schemas import SORTABLE_FIELDS
from app.utils.pagination import QueryOptions, paginate, parse_sort_by


def titles(page) -> list[str]:
    return [book.title for book in page.results]


class TestPaginate:

    def test_defaults(self, db_session, multiple_books):
        page = paginate(db_session, Book)

        assert page.page == 1
        assert page.limit == 10
        assert page.total_pages == 3
        assert page.total_results == 25

    def test_default_order_is_creation_order(self, db_session, multiple_books):
        page = paginate(db_session, Book, options=QueryOptions(limit=3))

        assert titles(page) == ["Book 00", "Book 01", "Book 02"]

    def test_middle_page(self, db_session, multiple_books):
        page = paginate(
            db_session, Book, options=QueryOptions(sort_by="title", limit=5, page=2)
        )

        assert titles(page) == ["Book 05", "Book 06", "Book 07", "Book 08", "Book 09"]

    def test_page_past_the_end_is_empty(self, db_session, multiple_books):
        page = paginate(db_session, Book, options=QueryOptions(limit=10, page=4))

        assert page.results == []
        assert page.total_results == 25

    def test_huge_page_skips_query(self, db_session, multiple_books):
        page = paginate(db_session, Book, options=QueryOptions(limit=100, page=10**20))

        assert page.results == []
        assert page.page == 10**20
        assert page.total_pages == 1
        assert page.total_results == 25

    def test_total_pages_rounds_up(self, db_session, multiple_books):
        page = paginate(db_session, Book, options=QueryOptions(limit=7))

        assert page.total_pages == 4

    @pytest.mark.parametrize("limit,page", [(0, 0), (-5, -1), (None, None)])
    def test_non_positive_values_fall_back(self, db_session, multiple_books, limit, page):
        result = paginate(db_session, Book, options=QueryOptions(limit=limit, page=page))

        assert result.limit == 10
        assert result.page == 1

    def test_custom_default_and_max_limit(self, db_session, multiple_books):
        assert paginate(db_session, Book, default_limit=4).limit == 4
        assert paginate(
            db_session, Book, options=QueryOptions(limit=50), max_limit=20
        ).limit == 20

    def test_equality_filters(self, db_session, multiple_books):
        page = paginate(
            db_session,
            Book,
            filters={"author": "Author 2", "publication_year": "1957"},
        )

        assert titles(page) == ["Book 07"]

    def test_none_filter_values_are_ignored(self, db_session, multiple_books):
        page = paginate(db_session, Book, filters={"title": None})

        assert page.total_results == 25

    def test_unknown_filter_raises(self, db_session):
        with pytest.raises(ValueError):
            paginate(db_session, Book, filters={"isbn": "123"})

    def test_works_for_other_models(self, db_session, admin_user, regular_user):
        page = paginate(db_session, User, options=QueryOptions(sort_by="email:desc"))

        assert [user.email for user in page.results] == [
            "reader@example.com",
            "admin@example.com",
        ]


class TestParseSortBy:

    def test_multiple_keys(self, db_session, multiple_books):
        page = paginate(
            db_session,
            Book,
            options=QueryOptions(sort_by="author:desc,title:asc", limit=6),
            sort_aliases=SORTABLE_FIELDS,
        )

        assert titles(page) == [
            "Book 04", "Book 09", "Book 14", "Book 19", "Book 24", "Book 03",
        ]

    def test_aliases_resolve_to_columns(self):
        clauses = parse_sort_by(Book, "createdAt:desc", SORTABLE_FIELDS)

        # requested key plus the primary key tie-breaker
        assert len(clauses) == 2
        assert "created_at DESC" in str(clauses[0])

    def test_default_sort(self):
        clauses = parse_sort_by(Book, None)

        assert "created_at ASC" in str(clauses[0])

    @pytest.mark.parametrize("sort_by", ["isbn", "title:up", "createdAt"])
    def test_invalid_sort_raises(self, sort_by):
        # Without aliases, API spellings such as createdAt are not columns
        with pytest.raises(ValueError):
            parse_sort_by(Book, sort_by)
