"""
pytest Fixtures for Books Service Tests

FIXTURE SCOPES:
- session: the in-memory Database (tables created once)
- function: a session wrapped in a transaction that is rolled back after
  each test, the HTTP client, users and sample books
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests-at-least-32-characters-long"
os.environ["DATABASE_URL"] = "sqlite://"

from collections.abc import Callable, Generator
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from app.database import Database, get_db
from app.main import create_app
from app.models import Book, User
from app.schemas import BookCreate
from app.services.books import create_book
from app.services.security import create_access_token

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory keeps the suite free of external services. StaticPool keeps
# the single connection alive; without it the in-memory database would vanish
# between connections.


@pytest.fixture(scope="session")
def database() -> Generator[Database, None, None]:
    """Create the test Database and its tables once per test session."""
    database = Database("sqlite://", poolclass=StaticPool)
    database.create_tables()

    yield database

    database.drop_tables()
    database.dispose()


@pytest.fixture(scope="function")
def db_session(database: Database) -> Generator[Session, None, None]:
    """
    Fresh database session for each test.

    The session is bound to a connection-level transaction that is rolled
    back afterwards, so commits made by services never leak between tests.
    """
    connection = database.engine.connect()
    transaction = connection.begin()
    session = database.session_factory(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(
    database: Database,
    db_session: Session,
) -> Generator[TestClient, None, None]:
    """
    Test client for an app built around the test Database.

    get_db is overridden so requests share the test's rolled-back session.
    """
    app = create_app(database=database)

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# USER AND TOKEN FIXTURES
# =============================================================================
def _make_user(db: Session, email: str, role: str, is_active: bool = True) -> User:
    user = User(email=email, name=email.split("@")[0].title(), role=role, is_active=is_active)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin_user(db_session: Session) -> User:
    """Holds getUsers and manageBooks."""
    return _make_user(db_session, "admin@example.com", "admin")


@pytest.fixture
def librarian_user(db_session: Session) -> User:
    """Holds manageBooks only."""
    return _make_user(db_session, "librarian@example.com", "librarian")


@pytest.fixture
def regular_user(db_session: Session) -> User:
    """Holds no rights."""
    return _make_user(db_session, "reader@example.com", "user")


@pytest.fixture
def inactive_admin(db_session: Session) -> User:
    return _make_user(db_session, "former-admin@example.com", "admin", is_active=False)


@pytest.fixture
def auth_headers() -> Callable[..., dict[str, str]]:
    """Build an Authorization header for a user."""

    def _headers(user: User, expires_delta: timedelta | None = None) -> dict[str, str]:
        token = create_access_token({"sub": str(user.id)}, expires_delta=expires_delta)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def admin_headers(admin_user: User, auth_headers) -> dict[str, str]:
    return auth_headers(admin_user)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def book_payload() -> dict[str, str]:
    """A valid create request body."""
    return {
        "title": "Seni Bersikap Bodo Amat",
        "publication_year": "12 Januari 1994",
        "author": "Mark Manson",
        "description": "A counterintuitive approach to living a good life",
        "publisher": "Airlangga",
    }


@pytest.fixture
def sample_book(db_session: Session, book_payload: dict[str, str]) -> Book:
    """Create a single book through the service."""
    return create_book(db_session, BookCreate(**book_payload))


@pytest.fixture
def multiple_books(db_session: Session) -> list[Book]:
    """Create 25 books for pagination testing."""
    return [
        create_book(
            db_session,
            BookCreate(
                title=f"Book {i:02d}",
                publication_year=str(1950 + i),
                author=f"Author {i % 5}",
                description=f"Description for book {i}",
                publisher="Test Press",
            ),
        )
        for i in range(25)
    ]
