"""
Identifier and ISBN shape checks shared by schemas and services.
"""

import re

from library_api.exceptions import ValidationError

# 8-4-4-4-12 hex groups, version 1-5, RFC 4122 variant
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

# Exactly 10 or 13 digits, hyphens allowed anywhere
ISBN_PATTERN = re.compile(r"^(?=(?:\D*\d){10}(?:(?:\D*\d){3})?$)[\d-]+$")


def is_valid_uuid(value: str) -> bool:
    return bool(UUID_PATTERN.match(str(value)))


def validate_uuid(value: str) -> str:
    """
    Ensure value is a canonical UUID string.

    Raises:
        ValidationError: If the value is not a well-formed UUID
    """
    if not is_valid_uuid(value):
        raise ValidationError(
            f"Invalid UUID format: {value}",
            context={"value": str(value)},
        )
    return str(value).lower()


def is_valid_isbn(value: str) -> bool:
    return bool(ISBN_PATTERN.match(value))
