"""Append-only repository for the review ledger."""

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from studyledger.domain.common.value_objects.ids import UserId
from studyledger.domain.learning.entities.review_event import ReviewEvent
from studyledger.infrastructure.common.storage import storage_errors
from studyledger.infrastructure.learning.mappers.review_event_mapper import ReviewEventMapper
from studyledger.models import ReviewEvent as ReviewEventORM


class ReviewLedgerRepository:
    """
    Repository for ReviewEvent domain entities.

    Events are only ever inserted. There is no update or delete; rows go
    away only through the cascade when their user or item is removed.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ReviewEventMapper()

    def append(self, event: ReviewEvent) -> ReviewEvent:
        """
        Insert a review event within the current transaction.

        Args:
            event: The event to append (ID 0)

        Returns:
            The stored event with its database-generated ID
        """
        orm_model = self.mapper.to_orm(event)
        with storage_errors("ledger append"):
            self.db.add(orm_model)
            self.db.flush()
            self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def query_by_user_and_date_range(
        self, user_id: UserId, start: datetime, end: datetime
    ) -> list[ReviewEvent]:
        """
        Get the events of a user with start <= review_date < end.

        Returns:
            Events ordered by review_date ASC
        """
        stmt = (
            select(ReviewEventORM)
            .where(
                ReviewEventORM.user_id == user_id.value,
                ReviewEventORM.review_date >= start,
                ReviewEventORM.review_date < end,
            )
            .order_by(ReviewEventORM.review_date.asc(), ReviewEventORM.id.asc())
        )
        with storage_errors("ledger range query"):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def average_quality(self, user_id: UserId) -> float | None:
        stmt = select(func.avg(ReviewEventORM.quality)).where(
            ReviewEventORM.user_id == user_id.value
        )
        with storage_errors("ledger average"):
            average = self.db.execute(stmt).scalar()
        return float(average) if average is not None else None
