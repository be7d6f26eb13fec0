"""
ReviewEvent entity - one immutable entry of the review ledger.
"""

from dataclasses import dataclass
from datetime import datetime

from studyledger.domain.common.entity import Entity
from studyledger.domain.common.exceptions import DomainError
from studyledger.domain.common.value_objects import ItemId, ReviewEventId, UserId
from studyledger.domain.learning.services.scheduler import ScheduleState, validate_quality


@dataclass(frozen=True)
class ReviewEvent(Entity[ReviewEventId]):
    """
    A single review of an item by a user.

    Business Rules:
    - Immutable once written (append-only ledger)
    - Quality is on the 0-5 scale
    - Elapsed time cannot be negative
    - Records the schedule before and after the review
    """

    id: ReviewEventId
    user_id: UserId
    item_id: ItemId
    review_date: datetime
    quality: int
    elapsed_ms: int
    previous_interval: int
    new_interval: int
    previous_ease_factor: int
    new_ease_factor: int

    def __post_init__(self) -> None:
        """Validate invariants."""
        validate_quality(self.quality)
        if self.elapsed_ms < 0:
            raise DomainError("Elapsed time cannot be negative")

    @classmethod
    def record(
        cls,
        user_id: UserId,
        item_id: ItemId,
        review_date: datetime,
        quality: int,
        previous: ScheduleState,
        updated: ScheduleState,
        elapsed_ms: int = 0,
    ) -> "ReviewEvent":
        """Create a new ledger entry (ID will be 0 until persisted)."""
        return cls(
            id=ReviewEventId.generate(),
            user_id=user_id,
            item_id=item_id,
            review_date=review_date,
            quality=quality,
            elapsed_ms=elapsed_ms,
            previous_interval=previous.interval,
            new_interval=updated.interval,
            previous_ease_factor=previous.ease_factor,
            new_ease_factor=updated.ease_factor,
        )
