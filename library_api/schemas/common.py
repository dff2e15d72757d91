"""
Shared Schema Building Blocks

- CamelModel: base class exposing snake_case fields under camelCase names
- ListResult: what services return from list operations
- PageMeta / PaginatedResponse: the envelope list endpoints return
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """
    Base schema for the public API.

    Python code uses snake_case attributes (first_name), JSON uses
    camelCase keys (firstName). populate_by_name=True accepts both on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ListResult(BaseModel, Generic[T]):
    """One page of rows plus the number of rows matching the filters."""

    data: list[T] = Field(..., description="Rows in the requested window")
    total: int = Field(..., ge=0, description="Rows matching the filters")


class PageMeta(CamelModel):
    """
    Pagination metadata for list responses.

    page and limit echo the normalized request values; total_pages is
    ceil(total / limit).
    """

    total: int = Field(..., ge=0, description="Total number of matching records")
    page: int = Field(..., ge=1, description="Current page number")
    limit: int = Field(..., ge=1, description="Number of items per page")
    total_pages: int = Field(..., ge=0, description="Total number of pages")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {"total": 23, "page": 1, "limit": 10, "totalPages": 3}
        },
    )


class PaginatedResponse(BaseModel, Generic[T]):
    """
    Envelope for list endpoints: {"data": [...], "meta": {...}}.
    """

    data: list[T] = Field(..., description="Items for this page")
    meta: PageMeta
