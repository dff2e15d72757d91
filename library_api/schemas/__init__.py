"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

Schema Naming Convention:
- XxxBase: Shared fields between create/response
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields allowed when updating (all optional)
- XxxResponse: Fields returned in API responses
- XxxQuery: Search and pagination parameters for list operations
"""

from library_api.schemas.author import (
    AuthorBase,
    AuthorCreate,
    AuthorQuery,
    AuthorResponse,
    AuthorUpdate,
)
from library_api.schemas.book import (
    BookBase,
    BookCreate,
    BookQuery,
    BookResponse,
    BookUpdate,
)
from library_api.schemas.common import (
    CamelModel,
    ListResult,
    PageMeta,
    PaginatedResponse,
)

__all__ = [
    # Shared
    "CamelModel",
    "ListResult",
    "PageMeta",
    "PaginatedResponse",
    # Author schemas
    "AuthorBase",
    "AuthorCreate",
    "AuthorUpdate",
    "AuthorResponse",
    "AuthorQuery",
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookQuery",
]
