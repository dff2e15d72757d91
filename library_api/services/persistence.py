"""
Datastore write helpers shared by the record services.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError, StatementError
from sqlalchemy.orm import Session

from library_api.exceptions import PersistenceError

logger = logging.getLogger(__name__)


def datastore_message(exc: SQLAlchemyError) -> str:
    """
    Return the underlying error message without SQLAlchemy's statement dump.

    StatementError covers both driver errors (DBAPIError) and failures
    while binding parameters, which wrap a plain Python exception.
    """
    if isinstance(exc, StatementError) and exc.orig is not None:
        return str(exc.orig).strip()
    return str(exc).strip()


@contextmanager
def persist(db: Session, failure: str) -> Generator[None, None, None]:
    """
    Run a block of writes and commit them as one unit.

    On any SQLAlchemy error the session is rolled back and a
    PersistenceError is raised whose message is
    "<failure>: <datastore message>".

    Usage:
        with persist(db, "Failed to create author"):
            db.add(author)
    """
    try:
        yield
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        message = f"{failure}: {datastore_message(exc)}"
        logger.error(message)
        raise PersistenceError(message, context={"operation": failure}) from exc
