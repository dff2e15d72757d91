"""
Author Pydantic Schemas

These schemas define the shape of data for Author-related API operations.
Fields are snake_case in Python and camelCase on the wire.
"""

import uuid
from datetime import date, datetime

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from library_api.schemas.common import CamelModel


def _strip_required(v: str, label: str) -> str:
    if not v.strip():
        raise ValueError(f"{label} cannot be empty or whitespace")
    return v.strip()


class AuthorBase(CamelModel):
    """
    Base schema with shared author fields.

    Contains fields common to create and response schemas.
    """

    first_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author's given name",
        examples=["George", "Jane"],
    )

    last_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author's family name",
        examples=["Orwell", "Austen"],
    )

    bio: str | None = Field(
        default=None,
        max_length=5000,
        description="Author biography",
        examples=["English novelist and essayist, journalist and critic..."],
    )

    birth_date: date | None = Field(
        default=None,
        description="Date of birth",
        examples=["1903-06-25"],
    )


class AuthorCreate(AuthorBase):
    """
    Schema for creating a new author.

    Example request body:
    {
        "firstName": "George",
        "lastName": "Orwell",
        "bio": "English novelist",
        "birthDate": "1903-06-25"
    }
    """

    @field_validator("first_name")
    @classmethod
    def first_name_must_not_be_empty(cls, v: str) -> str:
        return _strip_required(v, "First name")

    @field_validator("last_name")
    @classmethod
    def last_name_must_not_be_empty(cls, v: str) -> str:
        return _strip_required(v, "Last name")


class AuthorUpdate(CamelModel):
    """
    Schema for updating an existing author.

    All fields are optional: only the fields present in the request body
    are changed. The service reads them with model_dump(exclude_unset=True),
    so a field sent as null is still applied while an omitted one is not.
    """

    first_name: str | None = Field(
        default=None,
        min_length=1,
        max_length=255,
        description="Author's given name",
    )

    last_name: str | None = Field(
        default=None,
        min_length=1,
        max_length=255,
        description="Author's family name",
    )

    bio: str | None = Field(
        default=None,
        max_length=5000,
        description="Author biography",
    )

    birth_date: date | None = Field(
        default=None,
        description="Date of birth",
    )

    @field_validator("first_name", "last_name")
    @classmethod
    def names_must_not_be_empty(cls, v: str | None) -> str | None:
        """Validate names if provided."""
        if v is not None and not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip() if v else v


class AuthorResponse(AuthorBase):
    """
    Schema for author responses (what the API returns).

    Includes database fields like id and timestamps. Instances are
    immutable; build them with AuthorResponse.model_validate(orm_author).
    """

    id: uuid.UUID = Field(..., description="Unique identifier")
    created_at: datetime = Field(..., description="When the author was created")
    updated_at: datetime = Field(..., description="When the author was last updated")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "0b6f2b8e-4a51-4c1e-9d55-2f4f0d1f6a3e",
                "firstName": "George",
                "lastName": "Orwell",
                "bio": "English novelist and essayist, best known for '1984'.",
                "birthDate": "1903-06-25",
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z",
            }
        },
    )


class AuthorQuery(CamelModel):
    """
    Search and pagination parameters for listing authors.

    page and limit are kept as strings; services normalize them with
    library_api.utils.pagination.resolve_window().
    """

    page: str | None = Field(default="1", description="Page number (1-indexed)")
    limit: str | None = Field(default="10", description="Items per page")
    first_name: str | None = Field(
        default=None,
        description="Filter by first name (partial match, case-insensitive)",
    )
    last_name: str | None = Field(
        default=None,
        description="Filter by last name (partial match, case-insensitive)",
    )
