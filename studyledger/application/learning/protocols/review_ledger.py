"""Protocol for the append-only review ledger."""

from datetime import datetime
from typing import Protocol

from studyledger.domain.common.value_objects.ids import UserId
from studyledger.domain.learning.entities.review_event import ReviewEvent


class ReviewLedgerProtocol(Protocol):
    def append(self, event: ReviewEvent) -> ReviewEvent: ...

    def query_by_user_and_date_range(
        self, user_id: UserId, start: datetime, end: datetime
    ) -> list[ReviewEvent]: ...

    def average_quality(self, user_id: UserId) -> float | None: ...
