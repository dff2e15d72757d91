"""
SQLAlchemy Models Package

This package contains all database models for the Library API.
Models are SQLAlchemy ORM classes that map to database tables.

Model Relationships:
- Author <-> Book: One-to-Many (an author can write many books,
                   a book has exactly one author)

Import all models here to:
1. Make them available as: from library_api.models import Author, Book
2. Ensure Alembic discovers them for migrations
"""

# The order matters for SQLAlchemy to resolve relationships
from library_api.models.author import Author
from library_api.models.book import Book

__all__ = [
    "Author",
    "Book",
]
