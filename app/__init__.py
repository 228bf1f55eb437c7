"""
Books Service Application Package

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy Database object and session dependency
- main.py: FastAPI application factory and configuration
- dependencies.py: Authentication, authorization and query dependencies
- exceptions.py: Domain errors carrying HTTP status codes
- roles.py: Role to rights mapping
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Business logic
- utils/: Helper functions
"""

__version__ = "0.1.0"
