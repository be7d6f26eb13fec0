"""Storage helpers shared by the repositories."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

from sqlalchemy.exc import SQLAlchemyError

from studyledger.exceptions import PersistenceError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Raise PersistenceError for any SQLAlchemy failure inside the block."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"Storage failure during {operation}: {e!s}")
        raise PersistenceError(f"Storage failure during {operation}") from e


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from backends without time zones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
