"""
Database Configuration Module

SQLAlchemy 2.0 setup for the Books Service.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → open a session from the app's Database
2. Use that session for every operation in the request
3. Services commit explicitly; errors leave the transaction to be rolled back
4. Close the session when the request ends

Engine Ownership
================
There is no module-level engine. A Database object is constructed by the
application lifespan (see app.main), stored on app.state, and disposed of at
shutdown. Scripts and tests build their own Database the same way.
"""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover tables for migrations.
    """
    pass


class Database:
    """
    Owns the engine and session factory for one database.

    Example:
        database = Database("sqlite:///./books.db")
        database.create_tables()
        with database.session() as db:
            ...
        database.dispose()
    """

    def __init__(
        self,
        url: str,
        *,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
        **engine_kwargs: Any,
    ) -> None:
        if url.startswith("sqlite"):
            # SQLite connections are shared with FastAPI's worker threads
            connect_args = engine_kwargs.setdefault("connect_args", {})
            connect_args.setdefault("check_same_thread", False)
        else:
            engine_kwargs.setdefault("pool_size", pool_size)
            engine_kwargs.setdefault("max_overflow", max_overflow)
            engine_kwargs.setdefault("pool_pre_ping", True)

        self.url = url
        self.engine: Engine = create_engine(url, echo=echo, **engine_kwargs)
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
        )

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Open a session and close it when the block exits."""
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def ping(self) -> bool:
        """Return True if a trivial query succeeds."""
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True

    def create_tables(self) -> None:
        """
        Create all tables.

        Development and tests only; production schemas are managed by Alembic.
        """
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self) -> None:
        """Drop all tables. Deletes all data."""
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        """Close every pooled connection."""
        self.engine.dispose()


# =============================================================================
# Dependency Injection
# =============================================================================
def get_database(request: Request) -> Database:
    """Return the Database the application lifespan attached to app.state."""
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Code before yield opens the session, code after yield closes it, even
    when the route raised.

    Usage in Routes:
        @router.get("/books")
        def list_books(db: Session = Depends(get_db)):
            ...

    Yields:
        SQLAlchemy Session instance
    """
    with get_database(request).session() as db:
        yield db
