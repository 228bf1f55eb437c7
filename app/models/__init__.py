"""
SQLAlchemy Models Package

Import all models here to:
1. Make them available as: from app.models import Book, User
2. Ensure Alembic discovers them for migrations
"""

from app.models.book import Book
from app.models.user import User

__all__ = [
    "Book",
    "User",
]
