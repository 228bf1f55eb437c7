"""
Test Suite for the Books Service

Test Organization:
- conftest.py: Shared fixtures (test database, client, users, sample books)
- test_books.py: /api/v1/books endpoints
- test_book_service.py: Book service functions
- test_pagination.py: Generic pagination helper
- test_auth.py: Tokens, roles, 401/403 handling
- test_app.py: App factory, health check, error handlers

Running Tests:
    pytest
    pytest tests/test_books.py::TestCreateBook
"""
