"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Provided here:
- DbSession: the request-scoped SQLAlchemy session
- AuthorServiceDep / BookServiceDep: services built on that session
- AuthorFilters / BookFilters: list query parameters parsed into schemas
"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from library_api.database import get_db
from library_api.schemas import AuthorQuery, BookQuery
from library_api.services.authors import AuthorService
from library_api.services.books import BookService
from library_api.utils.pagination import MAX_PAGE

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def list_books(db: Session = Depends(get_db)):
#
# You can write:
#   def list_books(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Services
# =============================================================================
def get_author_service(db: DbSession) -> AuthorService:
    """Author service bound to the request's session."""
    return AuthorService(db)


def get_book_service(
    db: DbSession,
    authors: Annotated[AuthorService, Depends(get_author_service)],
) -> BookService:
    """Book service sharing the request's session and author service."""
    return BookService(db, authors)


AuthorServiceDep = Annotated[AuthorService, Depends(get_author_service)]
BookServiceDep = Annotated[BookService, Depends(get_book_service)]


# =============================================================================
# Pagination Parameters
# =============================================================================
# page is validated here: anything that is not an integer between 1 and
# MAX_PAGE (including negative numbers) is rejected with 422 before
# reaching a service.
# limit is passed through as text; the services fall back to the default
# page size for zero or non-numeric values.

PageParam = Annotated[
    int,
    Query(
        ge=1,
        le=MAX_PAGE,
        description="Page number (1-indexed)",
        examples=[1, 2, 3],
    ),
]
LimitParam = Annotated[
    str | None,
    Query(
        description="Number of items per page (invalid values use the default)",
        examples=["10", "25"],
    ),
]


# =============================================================================
# Search Filters
# =============================================================================
def get_author_filters(
    page: PageParam = 1,
    limit: LimitParam = "10",
    first_name: Annotated[
        str | None,
        Query(
            alias="firstName",
            description="Filter by first name (partial match, case-insensitive)",
        ),
    ] = None,
    last_name: Annotated[
        str | None,
        Query(
            alias="lastName",
            description="Filter by last name (partial match, case-insensitive)",
        ),
    ] = None,
) -> AuthorQuery:
    """
    Search and pagination parameters for GET /authors.

    Usage:
        GET /api/v1/authors?page=2&limit=20&firstName=jane
    """
    return AuthorQuery(
        page=str(page),
        limit=limit,
        first_name=first_name,
        last_name=last_name,
    )


def get_book_filters(
    page: PageParam = 1,
    limit: LimitParam = "10",
    title: Annotated[
        str | None,
        Query(description="Filter by title (partial match, case-insensitive)"),
    ] = None,
    isbn: Annotated[
        str | None,
        Query(description="Filter by ISBN (partial match)"),
    ] = None,
    genre: Annotated[
        str | None,
        Query(description="Filter by genre (partial match, case-insensitive)"),
    ] = None,
    author_id: Annotated[
        str | None,
        Query(alias="authorId", description="Filter by author ID (exact, UUID)"),
    ] = None,
) -> BookQuery:
    """
    Search and pagination parameters for GET /books.

    Usage:
        GET /api/v1/books?genre=fiction&authorId=<uuid>&page=1&limit=5
    """
    return BookQuery(
        page=str(page),
        limit=limit,
        title=title,
        isbn=isbn,
        genre=genre,
        author_id=author_id,
    )


AuthorFilters = Annotated[AuthorQuery, Depends(get_author_filters)]
BookFilters = Annotated[BookQuery, Depends(get_book_filters)]
