"""
Services Package

Business logic kept separate from HTTP handling (routers), so it can be
reused and tested against a session directly.

Current services:
- authors.py: Author CRUD, UUID validation, existence checks
- books.py: Book CRUD, author reference checks, ISBN uniqueness
- persistence.py: commit/rollback wrapper that raises PersistenceError
- rate_limiter.py: Rate limiting with slowapi
"""
