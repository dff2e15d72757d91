"""
Test Suite for the Library API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_authors.py: /api/v1/authors endpoints
- test_books.py: /api/v1/books endpoints
- test_author_service.py / test_book_service.py: services against a session
- test_pagination.py: page/limit normalization and response metadata
- test_app.py: health check, settings, client IP detection, seed script

Running Tests:
    pytest
    pytest tests/test_books.py
    pytest -v
"""
