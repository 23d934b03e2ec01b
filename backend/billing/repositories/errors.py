"""Driver Error Translation - SQLAlchemy exceptions to billing.core.errors.

Invariants:
    - IntegrityError -> ConflictError (unique email, foreign keys)
    - Any other SQLAlchemyError -> DatabaseError tagged with the operation name
    - The original exception is chained (raise ... from e), never swallowed
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from billing.core.errors import ConflictError, DatabaseError

logger = logging.getLogger(__name__)


@contextmanager
def translate_db_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except IntegrityError as e:
        logger.warning(
            f"DB integrity error during {operation}: {e.orig}",
            extra={"operation": operation, "error_code": "CONFLICT"},
        )
        raise ConflictError(f"{operation} violates a uniqueness or reference constraint") from e
    except OperationalError as e:
        logger.error(
            f"DB operational error during {operation}: {e}",
            extra={"operation": operation, "error_code": "DATABASE_ERROR"},
        )
        raise DatabaseError("Connection or operational error", operation) from e
    except SQLAlchemyError as e:
        logger.error(
            f"SQLAlchemy error during {operation}: {e}",
            extra={"operation": operation, "error_code": "DATABASE_ERROR"},
        )
        raise DatabaseError("Database operation failed", operation) from e
