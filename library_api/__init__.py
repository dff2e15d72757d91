"""
Library API Application Package

A FastAPI service for managing authors and the books they wrote.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- exceptions.py: Errors raised by services, mapped to HTTP in main.py
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Business logic (authors, books, rate limiting)
- utils/: Pagination and validation helpers
"""

__version__ = "1.0.0"
