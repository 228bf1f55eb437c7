"""
Utilities Package

Helpers shared across services:
- pagination.py: generic filter/sort/paginate for list endpoints
"""
