"""SQLAlchemy implementation of the Unit of Work port."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from studyledger.application.common.unit_of_work import UnitOfWork
from studyledger.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    Transaction boundary over the request-scoped session.

    Repositories sharing the session only flush; this class is the single
    place where the transaction is committed or rolled back.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to commit transaction: {e!s}")
            raise PersistenceError("Failed to commit transaction") from e

    def rollback(self) -> None:
        self.db.rollback()
