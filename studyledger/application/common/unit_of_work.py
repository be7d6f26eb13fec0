"""
Unit of Work port.

Every review of a batch runs in its own unit of work, so one failing
review leaves the reviews before and after it committed.

Example:
    with self.unit_of_work:
        update = self.progress_repository.upsert(user_id, item_id, quality, reviewed_at)
        self.review_ledger.append(event)
        self.unit_of_work.commit()
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Transaction boundary.

    Leaving the context with an exception rolls back. Leaving it normally
    does nothing: commit() must be called explicitly.
    """

    @abstractmethod
    def commit(self) -> None:
        """Commit the transaction; raises PersistenceError if that fails."""

    @abstractmethod
    def rollback(self) -> None: ...

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            self.rollback()
