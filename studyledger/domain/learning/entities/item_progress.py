"""
ItemProgress aggregate root.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from studyledger.domain.common.aggregate_root import AggregateRoot
from studyledger.domain.common.exceptions import InvariantViolationError
from studyledger.domain.common.value_objects import ItemId, ItemProgressId, UserId
from studyledger.domain.learning.events import ItemStatusChanged
from studyledger.domain.learning.services.scheduler import (
    DEFAULT_EASE_FACTOR,
    MIN_EASE_FACTOR,
    ReviewStatus,
    ScheduleState,
    is_correct,
    schedule,
)


@dataclass
class ItemProgress(AggregateRoot[ItemProgressId]):
    """
    How well a user knows a single item, and when it is due next.

    Business Rules:
    - Exactly one record per (user, item), created on the first review
    - correct_count + incorrect_count == review_count
    - Ease factor never drops below MIN_EASE_FACTOR
    - State changes only through the scheduler (record_review)
    """

    # Identity
    id: ItemProgressId
    user_id: UserId
    item_id: ItemId

    # Schedule
    interval: int
    ease_factor: int
    status: ReviewStatus
    due_date: datetime

    # Counters
    review_count: int
    correct_count: int
    incorrect_count: int

    last_review_date: datetime
    last_review_quality: int | None = None

    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if min(self.review_count, self.correct_count, self.incorrect_count) < 0:
            raise InvariantViolationError("ItemProgress", "counters cannot be negative")
        if self.correct_count + self.incorrect_count != self.review_count:
            raise InvariantViolationError(
                "ItemProgress", "correct_count + incorrect_count must equal review_count"
            )
        if self.interval < 0:
            raise InvariantViolationError("ItemProgress", "interval cannot be negative")
        if self.ease_factor < MIN_EASE_FACTOR:
            raise InvariantViolationError(
                "ItemProgress", f"ease_factor cannot be below {MIN_EASE_FACTOR}"
            )

    @property
    def schedule_state(self) -> ScheduleState:
        """Current scheduling state, as consumed by the scheduler."""
        return ScheduleState(
            interval=self.interval, ease_factor=self.ease_factor, status=self.status
        )

    def is_due(self, now: datetime) -> bool:
        """Whether the item should be reviewed at `now`."""
        return self.due_date <= now

    def record_review(self, quality: int, reviewed_at: datetime) -> ScheduleState:
        """
        Apply a review to this record.

        Args:
            quality: Recall score (0-5)
            reviewed_at: When the review happened

        Returns:
            The schedule state before the review

        Raises:
            ValidationError: If quality is out of range
        """
        previous = self.schedule_state
        if self.review_count == 0:
            # A record that was never reviewed is scheduled from scratch
            updated = schedule(quality, None)
        else:
            updated = schedule(quality, previous)

        self.interval = updated.interval
        self.ease_factor = updated.ease_factor
        self.status = updated.status
        self.review_count += 1
        if is_correct(quality):
            self.correct_count += 1
        else:
            self.incorrect_count += 1
        self.last_review_date = reviewed_at
        self.last_review_quality = quality
        self.due_date = reviewed_at + timedelta(days=updated.interval)

        if updated.status != previous.status:
            self._record_event(
                ItemStatusChanged(
                    user_id=self.user_id,
                    item_id=self.item_id,
                    previous_status=previous.status.value,
                    new_status=updated.status.value,
                )
            )
        return previous

    @classmethod
    def start(cls, user_id: UserId, item_id: ItemId, now: datetime) -> "ItemProgress":
        """Create an unreviewed record (ID will be 0 until persisted)."""
        return cls(
            id=ItemProgressId.generate(),
            user_id=user_id,
            item_id=item_id,
            interval=0,
            ease_factor=DEFAULT_EASE_FACTOR,
            status=ReviewStatus.NEW,
            due_date=now,
            review_count=0,
            correct_count=0,
            incorrect_count=0,
            last_review_date=now,
            last_review_quality=None,
        )

    @classmethod
    def create_with_id(
        cls,
        id: ItemProgressId,
        user_id: UserId,
        item_id: ItemId,
        interval: int,
        ease_factor: int,
        status: ReviewStatus,
        due_date: datetime,
        review_count: int,
        correct_count: int,
        incorrect_count: int,
        last_review_date: datetime,
        last_review_quality: int | None,
        created_at: datetime | None,
        updated_at: datetime | None,
    ) -> "ItemProgress":
        """Reconstitute a progress record from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            item_id=item_id,
            interval=interval,
            ease_factor=ease_factor,
            status=status,
            due_date=due_date,
            review_count=review_count,
            correct_count=correct_count,
            incorrect_count=incorrect_count,
            last_review_date=last_review_date,
            last_review_quality=last_review_quality,
            created_at=created_at,
            updated_at=updated_at,
        )
