"""
Book Pydantic Schemas

Handles:
- ISBN shape validation (10 or 13 digits, hyphens allowed)
- The nested author returned with every book
- Search parameters for list requests
"""

import uuid
from datetime import date, datetime

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from library_api.schemas.author import AuthorResponse
from library_api.schemas.common import CamelModel
from library_api.utils.validators import is_valid_isbn


def _check_isbn(v: str) -> str:
    cleaned = v.strip()
    if not is_valid_isbn(cleaned):
        raise ValueError("ISBN must be a valid 10 or 13 digit ISBN format")
    return cleaned


class BookBase(CamelModel):
    """
    Base schema with shared book fields.
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["1984", "Pride and Prejudice"],
    )

    isbn: str = Field(
        ...,
        min_length=10,
        max_length=20,
        description="ISBN-10 or ISBN-13, hyphens allowed",
        examples=["978-0451524935", "0-06-112008-1"],
    )

    published_date: date | None = Field(
        default=None,
        description="Date of publication",
        examples=["1949-06-08"],
    )

    genre: str | None = Field(
        default=None,
        max_length=100,
        description="Genre label",
        examples=["Dystopian", "Romance"],
    )


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    author_id is checked by the service (UUID shape, then existence),
    so a malformed value is reported as 400 rather than 422.

    Example request body:
    {
        "title": "1984",
        "isbn": "978-0451524935",
        "publishedDate": "1949-06-08",
        "genre": "Dystopian",
        "authorId": "0b6f2b8e-4a51-4c1e-9d55-2f4f0d1f6a3e"
    }
    """

    author_id: str = Field(
        ...,
        min_length=1,
        description="ID of the book's author",
    )

    @field_validator("isbn")
    @classmethod
    def validate_isbn(cls, v: str) -> str:
        return _check_isbn(v)

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize title."""
        if not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip()


class BookUpdate(CamelModel):
    """
    Schema for updating an existing book.

    All fields are optional for PATCH-style updates.
    """

    title: str | None = Field(
        default=None,
        min_length=1,
        max_length=500,
        description="Book title",
    )

    isbn: str | None = Field(
        default=None,
        min_length=10,
        max_length=20,
        description="ISBN-10 or ISBN-13",
    )

    published_date: date | None = Field(
        default=None,
        description="Date of publication",
    )

    genre: str | None = Field(
        default=None,
        max_length=100,
        description="Genre label",
    )

    author_id: str | None = Field(
        default=None,
        description="ID of the new author",
    )

    @field_validator("isbn")
    @classmethod
    def validate_isbn(cls, v: str | None) -> str | None:
        """Validate ISBN if provided."""
        if v is None:
            return v
        return _check_isbn(v)

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str | None) -> str | None:
        """Validate title if provided."""
        if v is not None and not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip() if v else v


class BookResponse(BookBase):
    """
    Schema for book responses.

    Every book carries its author, so clients get the full record without
    a second request.
    """

    id: uuid.UUID = Field(..., description="Unique identifier")
    author: AuthorResponse = Field(..., description="The book's author")
    created_at: datetime = Field(..., description="When the book was created")
    updated_at: datetime = Field(..., description="When the book was last updated")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "5d1c3e0a-7f5b-4c2a-8e9d-1a2b3c4d5e6f",
                "title": "1984",
                "isbn": "978-0451524935",
                "publishedDate": "1949-06-08",
                "genre": "Dystopian",
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z",
                "author": {
                    "id": "0b6f2b8e-4a51-4c1e-9d55-2f4f0d1f6a3e",
                    "firstName": "George",
                    "lastName": "Orwell",
                    "bio": "English novelist and essayist",
                    "birthDate": "1903-06-25",
                    "createdAt": "2024-01-15T10:30:00Z",
                    "updatedAt": "2024-01-15T10:30:00Z",
                },
            }
        },
    )


class BookQuery(CamelModel):
    """
    Search and pagination parameters for listing books.

    title, isbn and genre are partial, case-insensitive matches;
    author_id is an exact match and must be a valid UUID.
    """

    page: str | None = Field(default="1", description="Page number (1-indexed)")
    limit: str | None = Field(default="10", description="Items per page")
    title: str | None = Field(default=None, description="Filter by title")
    isbn: str | None = Field(default=None, description="Filter by ISBN")
    genre: str | None = Field(default=None, description="Filter by genre")
    author_id: str | None = Field(default=None, description="Filter by author ID")
