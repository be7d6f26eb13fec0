"""Mapper for ReviewEvent ORM ↔ Domain conversion."""

from studyledger.domain.common.value_objects import ItemId, ReviewEventId, UserId
from studyledger.domain.learning.entities.review_event import ReviewEvent
from studyledger.infrastructure.common.storage import as_utc
from studyledger.models import ReviewEvent as ReviewEventORM


class ReviewEventMapper:
    """Mapper for ReviewEvent ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ReviewEventORM) -> ReviewEvent:
        """Convert ORM model to domain entity."""
        return ReviewEvent(
            id=ReviewEventId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            item_id=ItemId(orm_model.item_id),
            review_date=as_utc(orm_model.review_date),
            quality=orm_model.quality,
            elapsed_ms=orm_model.elapsed_ms,
            previous_interval=orm_model.previous_interval,
            new_interval=orm_model.new_interval,
            previous_ease_factor=orm_model.previous_ease_factor,
            new_ease_factor=orm_model.new_ease_factor,
        )

    def to_orm(self, domain_entity: ReviewEvent) -> ReviewEventORM:
        """Convert domain entity to a new ORM model (ledger rows are never updated)."""
        return ReviewEventORM(
            user_id=domain_entity.user_id.value,
            item_id=domain_entity.item_id.value,
            review_date=domain_entity.review_date,
            quality=domain_entity.quality,
            elapsed_ms=domain_entity.elapsed_ms,
            previous_interval=domain_entity.previous_interval,
            new_interval=domain_entity.new_interval,
            previous_ease_factor=domain_entity.previous_ease_factor,
            new_ease_factor=domain_entity.new_ease_factor,
        )
