#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample users and books for local development,
then prints a bearer token for each user.

USAGE:
    python scripts/seed_data.py            # clear and reseed
    python scripts/seed_data.py --keep     # add to existing data

Use a token with:
    curl -H "Authorization: Bearer <token>" http://localhost:8001/api/v1/books
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import Database
from app.models import Book, User
from app.schemas import BookCreate
from app.services.books import create_book
from app.services.security import create_access_token


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.execute(delete(User))
    db.commit()
    print("Data cleared.")


def create_users(db: Session) -> list[User]:
    """Create one user per role."""
    print("Creating users...")
    users = [
        User(email="admin@example.com", name="Admin", role="admin"),
        User(email="librarian@example.com", name="Librarian", role="librarian"),
        User(email="reader@example.com", name="Reader", role="user"),
    ]
    db.add_all(users)
    db.commit()
    for user in users:
        db.refresh(user)

    print(f"Created {len(users)} users.")
    return users


def create_books(db: Session) -> list[Book]:
    """Create sample books through the book service."""
    print("Creating books...")
    books_data = [
        {
            "title": "Seni Bersikap Bodo Amat",
            "publication_year": "12 Januari 1994",
            "author": "Mark Manson",
            "description": "A counterintuitive approach to living a good life.",
            "publisher": "Airlangga",
        },
        {
            "title": "1984",
            "publication_year": "1949",
            "author": "George Orwell",
            "description": "A dystopian novel set in a totalitarian society.",
            "publisher": "Secker & Warburg",
        },
        {
            "title": "Pride and Prejudice",
            "publication_year": "1813",
            "author": "Jane Austen",
            "description": "The romantic clash between Elizabeth Bennet and Mr. Darcy.",
            "publisher": "T. Egerton",
        },
        {
            "title": "The Hobbit",
            "publication_year": "21 September 1937",
            "author": "J.R.R. Tolkien",
            "description": "Bilbo Baggins embarks on a quest to reclaim the Lonely Mountain.",
            "publisher": "George Allen & Unwin",
        },
        {
            "title": "Foundation",
            "publication_year": "1951",
            "author": "Isaac Asimov",
            "description": "The first novel about the fall of the Galactic Empire.",
            "publisher": "Gnome Press",
        },
    ]

    books = [create_book(db, BookCreate(**data)) for data in books_data]
    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    settings = get_settings()
    database = Database(settings.database_url)
    database.create_tables()

    try:
        with database.session() as db:
            try:
                if clear_existing:
                    clear_data(db)

                users = create_users(db)
                books = create_books(db)
            except Exception as e:
                print(f"Error seeding database: {e}")
                db.rollback()
                raise

            print("=" * 60)
            print("Database seeding completed successfully!")
            print("=" * 60)
            print(f"\nSummary:")
            print(f"  - Users: {len(users)}")
            print(f"  - Books: {len(books)}")
            print(f"\nAccess tokens:")
            for user in users:
                token = create_access_token({"sub": str(user.id)})
                print(f"  {user.role:<10} {token}")
    finally:
        database.dispose()


if __name__ == "__main__":
    seed_database(clear_existing="--keep" not in sys.argv)
