from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.services.errors import ConflictError, RecipeBookError, StorageError

logger = logging.getLogger("recipebook.storage")


@contextmanager
def write_transaction(db: Session, action: str, *, conflict: ConflictError | None = None) -> Iterator[Session]:
    """Commit everything done inside the block at once, or nothing.

    Domain errors are re-raised unchanged after the rollback; store failures
    become an opaque ``StorageError``. When ``conflict`` is given, a constraint
    violation raises it instead, so a uniqueness race reads the same as a
    failed pre-check.
    """
    try:
        yield db
        db.commit()
    except RecipeBookError:
        db.rollback()
        raise
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Constraint violation during %s: %s", action, exc.orig)
        if conflict is not None:
            raise conflict from exc
        raise StorageError() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Storage failure during %s", action)
        raise StorageError() from exc
