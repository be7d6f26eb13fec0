"""Mapper for ItemProgress ORM ↔ Domain conversion."""

from studyledger.domain.common.value_objects import ItemId, ItemProgressId, UserId
from studyledger.domain.learning.entities.item_progress import ItemProgress
from studyledger.domain.learning.services.scheduler import ReviewStatus
from studyledger.infrastructure.common.storage import as_utc
from studyledger.models import ItemProgress as ItemProgressORM


class ItemProgressMapper:
    """Mapper for ItemProgress ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ItemProgressORM) -> ItemProgress:
        """Convert ORM model to domain entity."""
        return ItemProgress.create_with_id(
            id=ItemProgressId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            item_id=ItemId(orm_model.item_id),
            interval=orm_model.interval,
            ease_factor=orm_model.ease_factor,
            status=ReviewStatus(orm_model.status),
            due_date=as_utc(orm_model.due_date),
            review_count=orm_model.review_count,
            correct_count=orm_model.correct_count,
            incorrect_count=orm_model.incorrect_count,
            last_review_date=as_utc(orm_model.last_review_date),
            last_review_quality=orm_model.last_review_quality,
            created_at=as_utc(orm_model.created_at) if orm_model.created_at else None,
            updated_at=as_utc(orm_model.updated_at) if orm_model.updated_at else None,
        )

    def to_orm(
        self, domain_entity: ItemProgress, orm_model: ItemProgressORM | None = None
    ) -> ItemProgressORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing; the key (user_id, item_id) never changes
            orm_model.interval = domain_entity.interval
            orm_model.ease_factor = domain_entity.ease_factor
            orm_model.status = domain_entity.status.value
            orm_model.due_date = domain_entity.due_date
            orm_model.review_count = domain_entity.review_count
            orm_model.correct_count = domain_entity.correct_count
            orm_model.incorrect_count = domain_entity.incorrect_count
            orm_model.last_review_date = domain_entity.last_review_date
            orm_model.last_review_quality = domain_entity.last_review_quality
            return orm_model

        # Create new
        return ItemProgressORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            user_id=domain_entity.user_id.value,
            item_id=domain_entity.item_id.value,
            interval=domain_entity.interval,
            ease_factor=domain_entity.ease_factor,
            status=domain_entity.status.value,
            due_date=domain_entity.due_date,
            review_count=domain_entity.review_count,
            correct_count=domain_entity.correct_count,
            incorrect_count=domain_entity.incorrect_count,
            last_review_date=domain_entity.last_review_date,
            last_review_quality=domain_entity.last_review_quality,
        )
