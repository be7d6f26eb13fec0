"""Protocol for the item progress store."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from studyledger.domain.common.domain_event import DomainEvent
from studyledger.domain.common.value_objects.ids import ItemId, UserId
from studyledger.domain.learning.entities.item_progress import ItemProgress
from studyledger.domain.learning.services.scheduler import ScheduleState


@dataclass(frozen=True)
class ProgressUpdate:
    """Outcome of applying one review to a progress record."""

    previous: ScheduleState
    progress: ItemProgress
    events: list[DomainEvent] = field(default_factory=list)


class ItemProgressRepositoryProtocol(Protocol):
    """Protocol for per (user, item) progress records."""

    def upsert(
        self, user_id: UserId, item_id: ItemId, quality: int, reviewed_at: datetime
    ) -> ProgressUpdate:
        """
        Apply a review to the record of (user_id, item_id), creating it if absent.

        Runs inside the caller's transaction and holds a lock on the record
        until that transaction ends. Does not commit.

        Raises:
            ConcurrentUpdateError: If another transaction created the record first
            PersistenceError: On any other storage failure
        """
        ...

    def find_by_user(self, user_id: UserId, limit: int, offset: int) -> list[ItemProgress]:
        """Progress records of a user, most recently reviewed first."""
        ...

    def count_by_user(self, user_id: UserId) -> int: ...

    def find_due(self, user_id: UserId, now: datetime, limit: int) -> list[ItemProgress]:
        """Records due at `now`, earliest due date first."""
        ...

    def count_mastered(self, user_id: UserId) -> int:
        """Count records whose last review was a full recall."""
        ...
