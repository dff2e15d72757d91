"""
Book Record Service

Owns Book CRUD. On top of the author service's rules it enforces:
- the referenced author exists when a book is created or re-assigned
- ISBNs are unique across all books
- every book is returned together with its author

The ISBN check runs before the write as a fast path. The unique index on
books.isbn is authoritative: if two requests race past the check, the
losing write fails and is reported as the same duplicate-ISBN error.
"""

import logging
import uuid

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from library_api.exceptions import NotFoundError, PersistenceError, ValidationError
from library_api.models import Book
from library_api.schemas import (
    BookCreate,
    BookQuery,
    BookResponse,
    BookUpdate,
    ListResult,
)
from library_api.services.authors import AuthorService
from library_api.services.persistence import datastore_message, persist
from library_api.utils.pagination import resolve_window
from library_api.utils.validators import validate_uuid

logger = logging.getLogger(__name__)


def apply_book_filters(stmt, query: BookQuery):
    """
    Apply search filters to a book query.

    Used for both the count query and the data query so that total and
    the returned window always describe the same set of rows.

    - title, isbn, genre: partial match, case-insensitive
    - author_id: exact match (must already be validated)
    """
    if query.title:
        stmt = stmt.where(Book.title.icontains(query.title, autoescape=True))
    if query.isbn:
        stmt = stmt.where(Book.isbn.icontains(query.isbn, autoescape=True))
    if query.genre:
        stmt = stmt.where(Book.genre.icontains(query.genre, autoescape=True))
    if query.author_id:
        stmt = stmt.where(Book.author_id == uuid.UUID(query.author_id))
    return stmt


class BookService:
    """
    CRUD operations for books.

    Author checks are delegated to the AuthorService, so its
    ValidationError and NotFoundError reach the caller unchanged.
    """

    def __init__(self, db: Session, authors: AuthorService) -> None:
        self.db = db
        self.authors = authors

    def create(self, data: BookCreate) -> BookResponse:
        """
        Create a book for an existing author.

        Checks run in order and stop at the first failure: author,
        then ISBN uniqueness, then the insert.

        Raises:
            ValidationError: Malformed author_id, or ISBN already in use
            NotFoundError: The author does not exist
            PersistenceError: The datastore rejects the insert
        """
        author = self.authors.find_one(data.author_id)

        if self._isbn_in_use(data.isbn):
            logger.warning(f"Duplicate ISBN rejected: {data.isbn}")
            raise ValidationError(
                f"Book with ISBN {data.isbn} already exists",
                field="isbn",
            )

        book = Book(
            title=data.title,
            isbn=data.isbn,
            published_date=data.published_date,
            genre=data.genre,
            author_id=author.id,
        )

        try:
            with persist(self.db, "Failed to create book"):
                self.db.add(book)
        except PersistenceError:
            if self._isbn_in_use(data.isbn):
                raise ValidationError(
                    f"Book with ISBN {data.isbn} already exists",
                    field="isbn",
                )
            raise

        logger.info(f"Created book {book.id} for author {author.id}")
        return self.find_one(str(book.id))

    def find_all(self, query: BookQuery) -> ListResult[BookResponse]:
        """
        Search books with pagination, newest first.

        Raises:
            ValidationError: If author_id is given and is not a UUID
            PersistenceError: If either query fails
        """
        if query.author_id:
            validate_uuid(query.author_id)

        window = resolve_window(query.page, query.limit)
        logger.debug(
            f"Listing books: title={query.title!r}, isbn={query.isbn!r}, "
            f"genre={query.genre!r}, author_id={query.author_id!r}, window={window}"
        )

        try:
            count_stmt = apply_book_filters(select(func.count(Book.id)), query)
            total = self.db.execute(count_stmt).scalar() or 0

            data_stmt = (
                apply_book_filters(select(Book), query)
                .options(joinedload(Book.author))
                .order_by(Book.created_at.desc(), Book.id)
                .offset(window.offset)
                .limit(window.limit)
            )
            books = self.db.execute(data_stmt).scalars().all()
        except SQLAlchemyError as exc:
            self.db.rollback()
            message = f"Failed to fetch books: {datastore_message(exc)}"
            logger.error(message)
            raise PersistenceError(message) from exc

        return ListResult[BookResponse](
            data=[BookResponse.model_validate(book) for book in books],
            total=total,
        )

    def find_one(self, book_id: str) -> BookResponse:
        """
        Get a book with its author.

        Raises:
            ValidationError: If book_id is not a well-formed UUID
            NotFoundError: If no book has that ID
        """
        return BookResponse.model_validate(self.get_book_or_raise(book_id))

    def get_book_or_raise(self, book_id: str) -> Book:
        """
        Load the Book row with its author eagerly joined.

        A datastore error during the lookup is reported as not found.
        """
        validate_uuid(book_id)

        stmt = (
            select(Book)
            .options(joinedload(Book.author))
            .where(Book.id == uuid.UUID(book_id))
        )
        try:
            book = self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.warning(f"Lookup of book {book_id} failed: {exc}")
            book = None

        if book is None:
            logger.info(f"Book {book_id} not found")
            raise NotFoundError("Book", book_id)
        return book

    def update(self, book_id: str, data: BookUpdate) -> BookResponse:
        """
        Apply a partial update.

        Raises:
            ValidationError: Malformed ID, malformed new author_id, or the
                new ISBN belongs to another book
            NotFoundError: The book, or the new author, does not exist
            PersistenceError: The datastore rejects the update
        """
        book = self.get_book_or_raise(book_id)

        update_data = data.model_dump(exclude_unset=True)

        if update_data.get("author_id") is not None:
            author = self.authors.find_one(update_data["author_id"])
            update_data["author_id"] = author.id

        new_isbn = update_data.get("isbn")
        if new_isbn and self._isbn_in_use(new_isbn, exclude_id=book.id):
            logger.warning(f"Duplicate ISBN rejected during update: {new_isbn}")
            raise ValidationError(
                f"Book with ISBN {new_isbn} already exists",
                field="isbn",
            )

        if not update_data:
            return BookResponse.model_validate(book)

        try:
            with persist(self.db, "Failed to update book"):
                for field, value in update_data.items():
                    setattr(book, field, value)
        except PersistenceError:
            if new_isbn and self._isbn_in_use(new_isbn, exclude_id=book.id):
                raise ValidationError(
                    f"Book with ISBN {new_isbn} already exists",
                    field="isbn",
                )
            raise

        logger.info(f"Updated book {book_id}: {sorted(update_data)}")
        return self.find_one(book_id)

    def remove(self, book_id: str) -> None:
        """
        Delete a book.

        Raises:
            ValidationError: If book_id is not a well-formed UUID
            NotFoundError: If the book does not exist
            PersistenceError: If the datastore rejects the delete
        """
        validate_uuid(book_id)
        if not self._exists(book_id):
            logger.info(f"Book {book_id} not found for deletion")
            raise NotFoundError("Book", book_id)

        with persist(self.db, "Failed to delete book"):
            result = self.db.execute(
                delete(Book).where(Book.id == uuid.UUID(book_id))
            )

        if result.rowcount == 0:
            raise NotFoundError("Book", book_id)
        logger.info(f"Deleted book {book_id}")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _exists(self, book_id: str) -> bool:
        try:
            found = self.db.execute(
                select(Book.id).where(Book.id == uuid.UUID(book_id))
            ).first()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.warning(f"Existence check for book {book_id} failed: {exc}")
            return False
        return found is not None

    def _isbn_in_use(self, isbn: str, exclude_id: uuid.UUID | None = None) -> bool:
        """True if a book (other than exclude_id) already has this exact ISBN."""
        stmt = select(Book.id).where(Book.isbn == isbn)
        if exclude_id is not None:
            stmt = stmt.where(Book.id != exclude_id)
        try:
            found = self.db.execute(stmt.limit(1)).first()
        except SQLAlchemyError as exc:
            self.db.rollback()
            message = f"Failed to check ISBN: {datastore_message(exc)}"
            logger.error(message)
            raise PersistenceError(message) from exc
        return found is not None
