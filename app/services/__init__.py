"""
Services Package

Business logic kept separate from HTTP handling:
- books.py: Book create/read/query/update/delete
- security.py: JWT access token encoding and verification
"""
