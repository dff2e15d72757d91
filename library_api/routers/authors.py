"""
Authors Router

CRUD endpoints for authors. Business rules live in AuthorService;
these handlers only translate between HTTP and the service.
"""

from fastapi import APIRouter, Request, status

from library_api.config import get_settings
from library_api.dependencies import AuthorFilters, AuthorServiceDep
from library_api.schemas import (
    AuthorCreate,
    AuthorResponse,
    AuthorUpdate,
    PaginatedResponse,
)
from library_api.services.rate_limiter import limiter
from library_api.utils.pagination import build_page_meta

settings = get_settings()

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        400: {"description": "Malformed ID or rejected write"},
        404: {"description": "Author not found"},
    },
)


@router.post(
    "",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
    description="Create a new author in the system.",
)
@limiter.limit(settings.rate_limit_write)
def create_author(
    request: Request,
    author_data: AuthorCreate,
    service: AuthorServiceDep,
) -> AuthorResponse:
    """Create a new author."""
    return service.create(author_data)


@router.get(
    "",
    response_model=PaginatedResponse[AuthorResponse],
    summary="List authors",
    description="Get a paginated list of authors, optionally filtered by name.",
)
@limiter.limit(settings.rate_limit_default)
def list_authors(
    request: Request,
    filters: AuthorFilters,
    service: AuthorServiceDep,
) -> PaginatedResponse[AuthorResponse]:
    """
    List authors with pagination, newest first.

    Examples:
        GET /api/v1/authors?firstName=jane
        GET /api/v1/authors?page=2&limit=5
    """
    result = service.find_all(filters)
    return PaginatedResponse[AuthorResponse](
        data=result.data,
        meta=build_page_meta(result.total, filters.page, filters.limit),
    )


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Get an author by ID",
    description="Retrieve detailed information about a specific author.",
)
@limiter.limit(settings.rate_limit_default)
def get_author(
    request: Request,
    author_id: str,
    service: AuthorServiceDep,
) -> AuthorResponse:
    """Get a single author by ID."""
    return service.find_one(author_id)


@router.patch(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Update an author",
    description="Update only the supplied fields of an existing author.",
)
@limiter.limit(settings.rate_limit_write)
def update_author(
    request: Request,
    author_id: str,
    author_data: AuthorUpdate,
    service: AuthorServiceDep,
) -> AuthorResponse:
    """Update an existing author."""
    return service.update(author_id, author_data)


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author",
    description="Permanently delete an author. Fails while the author still has books.",
)
@limiter.limit(settings.rate_limit_write)
def delete_author(
    request: Request,
    author_id: str,
    service: AuthorServiceDep,
) -> None:
    """Delete an author."""
    service.remove(author_id)
