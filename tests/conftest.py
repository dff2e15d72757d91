"""
pytest Fixtures for Library API Tests

Fixtures provide:
- A SQLite in-memory database, created fresh for every test
- A TestClient wired to that database through dependency overrides
- Services bound to the same session
- Sample authors and books

Each test gets its own engine and tables, so commits made by the
services (and rollbacks after failed writes) never leak between tests.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ENVIRONMENT"] = "test"

from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from library_api.database import Base, enable_sqlite_foreign_keys, get_db
from library_api.main import app
from library_api.models import Author, Book
from library_api.services.authors import AuthorService
from library_api.services.books import BookService

API = "/api/v1"


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture
def engine():
    """
    Create a SQLite in-memory database engine with all tables.

    StaticPool keeps the single connection alive for the whole test;
    without it the in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    """Create a database session for one test."""
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    session = TestSessionLocal()

    yield session

    session.close()


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client that uses the test database.

    get_db is overridden so every request shares the test session.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================
@pytest.fixture
def author_service(db_session: Session) -> AuthorService:
    return AuthorService(db_session)


@pytest.fixture
def book_service(db_session: Session, author_service: AuthorService) -> BookService:
    return BookService(db_session, author_service)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_author(db_session: Session) -> Author:
    """Create a sample author for testing."""
    author = Author(
        first_name="George",
        last_name="Orwell",
        bio="English novelist and essayist, journalist and critic.",
        birth_date=date(1903, 6, 25),
    )
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def second_author(db_session: Session) -> Author:
    """Create a second author for re-assignment and filter tests."""
    author = Author(first_name="Jane", last_name="Austen")
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_book(db_session: Session, sample_author: Author) -> Book:
    """Create a sample book written by sample_author."""
    book = Book(
        title="1984",
        isbn="978-0451524935",
        published_date=date(1949, 6, 8),
        genre="Dystopian",
        author_id=sample_author.id,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(db_session: Session, sample_author: Author) -> list[Book]:
    """Create 23 books for pagination testing."""
    books = []
    for i in range(23):
        book = Book(
            title=f"Test Book {i + 1}",
            isbn=f"978000000{i:04d}",
            genre="Fiction" if i % 2 == 0 else "Poetry",
            author_id=sample_author.id,
        )
        books.append(book)
        db_session.add(book)

    db_session.commit()
    for book in books:
        db_session.refresh(book)

    return books
