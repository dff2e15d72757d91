#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample authors and books for development.

USAGE:
    # From the project root with the virtualenv activated
    python scripts/seed_data.py            # add sample data
    python scripts/seed_data.py --clear    # wipe books and authors first

Rows are created through AuthorService and BookService, so the same
checks apply as for API requests (author must exist, ISBN unique).
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from library_api.database import SessionLocal, create_tables
from library_api.exceptions import ValidationError
from library_api.models import Author, Book
from library_api.schemas import AuthorCreate, AuthorResponse, BookCreate, BookResponse
from library_api.services.authors import AuthorService
from library_api.services.books import BookService

logger = logging.getLogger("seed_data")

AUTHORS = [
    {
        "first_name": "George",
        "last_name": "Orwell",
        "bio": "English novelist and essayist, journalist and critic.",
        "birth_date": "1903-06-25",
    },
    {
        "first_name": "Jane",
        "last_name": "Austen",
        "bio": "English novelist known for her six major novels.",
        "birth_date": "1775-12-16",
    },
    {
        "first_name": "Isaac",
        "last_name": "Asimov",
        "bio": "American writer and professor of biochemistry.",
        "birth_date": "1920-01-02",
    },
]

# (author last name, book fields)
BOOKS = [
    ("Orwell", {"title": "1984", "isbn": "978-0451524935",
                "published_date": "1949-06-08", "genre": "Dystopian"}),
    ("Orwell", {"title": "Animal Farm", "isbn": "978-0451526342",
                "published_date": "1945-08-17", "genre": "Satire"}),
    ("Austen", {"title": "Pride and Prejudice", "isbn": "978-0141439518",
                "published_date": "1813-01-28", "genre": "Romance"}),
    ("Asimov", {"title": "Foundation", "isbn": "978-0553293357",
                "published_date": "1951-05-01", "genre": "Science Fiction"}),
    ("Asimov", {"title": "I, Robot", "isbn": "978-0553382563",
                "published_date": "1950-12-02", "genre": "Science Fiction"}),
]


def clear_data(db: Session) -> None:
    """Delete all books, then all authors."""
    logger.info("Clearing existing data...")
    db.execute(delete(Book))
    db.execute(delete(Author))
    db.commit()


def seed_database(db: Session, clear_existing: bool = False) -> tuple[list[AuthorResponse], list[BookResponse]]:
    """
    Create the sample authors and books.

    Books whose ISBN already exists are skipped, so running the script
    twice without --clear doesn't fail.

    Returns:
        (created authors, created books)
    """
    if clear_existing:
        clear_data(db)

    author_service = AuthorService(db)
    book_service = BookService(db, author_service)

    authors = {}
    for data in AUTHORS:
        author = author_service.create(AuthorCreate(**data))
        authors[author.last_name] = author

    books = []
    for last_name, data in BOOKS:
        payload = BookCreate(author_id=str(authors[last_name].id), **data)
        try:
            books.append(book_service.create(payload))
        except ValidationError as exc:
            logger.warning(f"Skipping {payload.title!r}: {exc.message}")

    logger.info(f"Created {len(authors)} authors and {len(books)} books")
    return list(authors.values()), books


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the Library API database")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="delete existing books and authors before seeding",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")

    create_tables()
    db = SessionLocal()
    try:
        seed_database(db, clear_existing=args.clear)
    finally:
        db.close()

    logger.info("API docs at http://localhost:8001/docs")


if __name__ == "__main__":
    main()
