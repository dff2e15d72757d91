"""
Library API Exception Hierarchy

Services raise these instead of HTTPException so that business rules stay
independent of the transport. Handlers registered in main.py translate
them into JSON responses.

Exception Hierarchy:
    LibraryError (base)
    ├── ValidationError   → 400 Bad Request (malformed id, duplicate ISBN)
    ├── NotFoundError     → 404 Not Found
    └── PersistenceError  → 400 Bad Request (datastore rejected a write)
"""

from typing import Any, Dict, Optional


class LibraryError(Exception):
    """
    Base exception for all Library API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not returned to client)
    """

    error_code = "library_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(LibraryError):
    """
    Raised when input is malformed or would break an invariant.

    Detected before any write is attempted: an invalid UUID, or an ISBN
    already used by another book.
    """

    error_code = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(LibraryError):
    """
    Raised when a referenced author or book does not exist.

    A failed lookup and a missing row are reported the same way.
    """

    error_code = "not_found"

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource.lower()} was not found"
        if resource_id:
            message = f"{resource} with ID {resource_id} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class PersistenceError(LibraryError):
    """
    Raised when the datastore reports an error on insert, update or delete.

    The underlying datastore message is embedded in the error message.
    """

    error_code = "persistence_error"

    def __init__(
        self,
        message: str = "Database write failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
