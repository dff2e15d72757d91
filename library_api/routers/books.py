"""
Books Router

CRUD endpoints for books.

Every book in a response embeds its author. Creating or re-assigning a
book checks that the author exists; ISBNs must be unique.
"""

from fastapi import APIRouter, Request, status

from library_api.config import get_settings
from library_api.dependencies import BookFilters, BookServiceDep
from library_api.schemas import (
    BookCreate,
    BookResponse,
    BookUpdate,
    PaginatedResponse,
)
from library_api.services.rate_limiter import limiter
from library_api.utils.pagination import build_page_meta

settings = get_settings()

# =============================================================================
# Router Configuration
# =============================================================================
router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        400: {"description": "Malformed ID, duplicate ISBN or rejected write"},
        404: {"description": "Book or author not found"},
    },
)


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Create a new book for an existing author.",
)
@limiter.limit(settings.rate_limit_write)
def create_book(
    request: Request,
    book_data: BookCreate,
    service: BookServiceDep,
) -> BookResponse:
    """
    Create a new book.

    Raises:
        400: authorId is not a UUID, or the ISBN is already used
        404: The author does not exist
    """
    return service.create(book_data)


@router.get(
    "",
    response_model=PaginatedResponse[BookResponse],
    summary="List books",
    description="Get a paginated list of books with optional filtering.",
)
@limiter.limit(settings.rate_limit_default)
def list_books(
    request: Request,
    filters: BookFilters,
    service: BookServiceDep,
) -> PaginatedResponse[BookResponse]:
    """
    List books with pagination and optional filtering.

    Supported filters:
    - title, isbn, genre: partial match, case-insensitive
    - authorId: exact match, must be a valid UUID

    Examples:
        GET /api/v1/books?title=farm
        GET /api/v1/books?authorId=<uuid>&page=1&limit=5
    """
    result = service.find_all(filters)
    return PaginatedResponse[BookResponse](
        data=result.data,
        meta=build_page_meta(result.total, filters.page, filters.limit),
    )


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
    description="Retrieve a specific book together with its author.",
)
@limiter.limit(settings.rate_limit_default)
def get_book(
    request: Request,
    book_id: str,
    service: BookServiceDep,
) -> BookResponse:
    """Get a single book by its ID."""
    return service.find_one(book_id)


@router.patch(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="Update only the supplied fields of an existing book.",
)
@limiter.limit(settings.rate_limit_write)
def update_book(
    request: Request,
    book_id: str,
    book_data: BookUpdate,
    service: BookServiceDep,
) -> BookResponse:
    """
    Update an existing book.

    Only provided fields are updated. A new authorId must reference an
    existing author; a new ISBN must not belong to another book.
    """
    return service.update(book_id, book_data)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    description="Permanently delete a book from the database.",
)
@limiter.limit(settings.rate_limit_write)
def delete_book(
    request: Request,
    book_id: str,
    service: BookServiceDep,
) -> None:
    """
    Delete a book.

    Returns 204 No Content on success.
    """
    service.remove(book_id)
