"""
Author Record Service

Owns Author CRUD: UUID shape validation, existence checks, partial
updates and search/pagination queries. Routers and the book service use
it; it never raises HTTPException itself.
"""

import logging
import uuid

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from library_api.exceptions import NotFoundError, PersistenceError
from library_api.models import Author
from library_api.schemas import (
    AuthorCreate,
    AuthorQuery,
    AuthorResponse,
    AuthorUpdate,
    ListResult,
)
from library_api.services.persistence import datastore_message, persist
from library_api.utils.pagination import resolve_window
from library_api.utils.validators import validate_uuid

logger = logging.getLogger(__name__)


class AuthorService:
    """
    CRUD operations for authors.

    The session is injected by the caller and is the only state the
    service holds.

    Usage:
        service = AuthorService(db)
        author = service.create(AuthorCreate(first_name="Jane", last_name="Austen"))
        service.find_one(str(author.id))
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, data: AuthorCreate) -> AuthorResponse:
        """
        Persist a new author.

        Raises:
            PersistenceError: If the datastore rejects the insert
        """
        author = Author(
            first_name=data.first_name,
            last_name=data.last_name,
            bio=data.bio,
            birth_date=data.birth_date,
        )

        with persist(self.db, "Failed to create author"):
            self.db.add(author)
        self.db.refresh(author)

        logger.info(f"Created author {author.id}")
        return AuthorResponse.model_validate(author)

    def find_all(self, query: AuthorQuery) -> ListResult[AuthorResponse]:
        """
        Search authors with pagination, newest first.

        first_name and last_name are case-insensitive substring filters.
        total counts every matching author regardless of the page window.

        Raises:
            PersistenceError: If either query fails
        """
        window = resolve_window(query.page, query.limit)

        stmt = select(Author)
        if query.first_name:
            stmt = stmt.where(Author.first_name.icontains(query.first_name, autoescape=True))
        if query.last_name:
            stmt = stmt.where(Author.last_name.icontains(query.last_name, autoescape=True))

        logger.debug(
            f"Listing authors: first_name={query.first_name!r}, "
            f"last_name={query.last_name!r}, window={window}"
        )

        try:
            count_stmt = select(func.count()).select_from(stmt.subquery())
            total = self.db.execute(count_stmt).scalar() or 0

            page_stmt = (
                stmt
                .order_by(Author.created_at.desc(), Author.id)
                .offset(window.offset)
                .limit(window.limit)
            )
            authors = self.db.execute(page_stmt).scalars().all()
        except SQLAlchemyError as exc:
            self.db.rollback()
            message = f"Failed to fetch authors: {datastore_message(exc)}"
            logger.error(message)
            raise PersistenceError(message) from exc

        return ListResult[AuthorResponse](
            data=[AuthorResponse.model_validate(a) for a in authors],
            total=total,
        )

    def find_one(self, author_id: str) -> AuthorResponse:
        """
        Get an author by ID.

        Raises:
            ValidationError: If author_id is not a well-formed UUID
            NotFoundError: If no author has that ID
        """
        return AuthorResponse.model_validate(self.get_author_or_raise(author_id))

    def get_author_or_raise(self, author_id: str) -> Author:
        """
        Load the Author row, validating the ID first.

        A datastore error during the lookup is reported as not found.
        """
        validate_uuid(author_id)

        try:
            author = self.db.execute(
                select(Author).where(Author.id == uuid.UUID(author_id))
            ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.warning(f"Lookup of author {author_id} failed: {exc}")
            author = None

        if author is None:
            logger.info(f"Author {author_id} not found")
            raise NotFoundError("Author", author_id)
        return author

    def update(self, author_id: str, data: AuthorUpdate) -> AuthorResponse:
        """
        Apply a partial update.

        Only fields present in the request are written; a request with no
        fields returns the current record unchanged.

        Raises:
            ValidationError: If author_id is not a well-formed UUID
            NotFoundError: If the author does not exist
            PersistenceError: If the datastore rejects the update
        """
        author = self.get_author_or_raise(author_id)

        update_data = data.model_dump(exclude_unset=True)
        if not update_data:
            return AuthorResponse.model_validate(author)

        with persist(self.db, "Failed to update author"):
            for field, value in update_data.items():
                setattr(author, field, value)
        self.db.refresh(author)

        logger.info(f"Updated author {author_id}: {sorted(update_data)}")
        return AuthorResponse.model_validate(author)

    def remove(self, author_id: str) -> None:
        """
        Delete an author.

        Books are not deleted with their author; the foreign key rejects
        deleting an author that still has books.

        Raises:
            ValidationError: If author_id is not a well-formed UUID
            NotFoundError: If the author does not exist
            PersistenceError: If the datastore rejects the delete
        """
        validate_uuid(author_id)
        if not self.exists(author_id):
            logger.info(f"Author {author_id} not found for deletion")
            raise NotFoundError("Author", author_id)

        with persist(self.db, "Failed to delete author"):
            result = self.db.execute(
                delete(Author).where(Author.id == uuid.UUID(author_id))
            )

        if result.rowcount == 0:
            # Removed by another request between the check and the delete
            raise NotFoundError("Author", author_id)
        logger.info(f"Deleted author {author_id}")

    def exists(self, author_id: str) -> bool:
        """Check for an author row by ID without loading it."""
        try:
            found = self.db.execute(
                select(Author.id).where(Author.id == uuid.UUID(author_id))
            ).first()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.warning(f"Existence check for author {author_id} failed: {exc}")
            return False
        return found is not None
