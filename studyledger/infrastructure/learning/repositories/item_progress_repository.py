"""Repository for ItemProgress domain entities."""

import logging
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from studyledger.application.learning.protocols.item_progress_repository import ProgressUpdate
from studyledger.domain.common.value_objects.ids import ItemId, UserId
from studyledger.domain.learning.entities.item_progress import ItemProgress
from studyledger.domain.learning.services.scheduler import FULL_RECALL_QUALITY
from studyledger.exceptions import ConcurrentUpdateError, PersistenceError
from studyledger.infrastructure.common.storage import storage_errors
from studyledger.infrastructure.learning.mappers.item_progress_mapper import ItemProgressMapper
from studyledger.models import ItemProgress as ItemProgressORM

logger = logging.getLogger(__name__)


class ItemProgressRepository:
    """Repository for ItemProgress domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ItemProgressMapper()

    def upsert(
        self, user_id: UserId, item_id: ItemId, quality: int, reviewed_at: datetime
    ) -> ProgressUpdate:
        """
        Apply a review to the progress record of (user_id, item_id).

        The record is read with SELECT ... FOR UPDATE so that concurrent
        reviews of the same key are applied one after another. When no record
        exists yet, it is inserted; losing the insert race to another
        transaction surfaces as ConcurrentUpdateError.

        Args:
            user_id: The user ID
            item_id: The catalog item ID
            quality: Recall score (0-5)
            reviewed_at: When the review happened

        Returns:
            The schedule before the review and the updated record
        """
        stmt = (
            select(ItemProgressORM)
            .where(
                ItemProgressORM.user_id == user_id.value,
                ItemProgressORM.item_id == item_id.value,
            )
            .with_for_update()
        )
        with storage_errors("progress lookup"):
            orm_model = self.db.execute(stmt).scalar_one_or_none()

        if orm_model is None:
            progress = ItemProgress.start(user_id, item_id, reviewed_at)
            previous = progress.record_review(quality, reviewed_at)
            orm_model = self.mapper.to_orm(progress)
            try:
                self.db.add(orm_model)
                self.db.flush()
            except IntegrityError as e:
                # Another transaction inserted the same key first
                raise ConcurrentUpdateError(user_id.value, item_id.value) from e
            except SQLAlchemyError as e:
                raise PersistenceError("Storage failure during progress insert") from e
        else:
            progress = self.mapper.to_domain(orm_model)
            previous = progress.record_review(quality, reviewed_at)
            self.mapper.to_orm(progress, orm_model)
            with storage_errors("progress update"):
                self.db.flush()

        with storage_errors("progress refresh"):
            self.db.refresh(orm_model)

        logger.debug(
            f"Applied review to progress of user {user_id.value}, item {item_id.value}: "
            f"interval {previous.interval} -> {orm_model.interval}"
        )
        return ProgressUpdate(
            previous=previous,
            progress=self.mapper.to_domain(orm_model),
            events=progress.collect_events(),
        )

    def find_by_user(self, user_id: UserId, limit: int, offset: int) -> list[ItemProgress]:
        """
        Get progress records of a user.

        Args:
            user_id: The user ID
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Records ordered by last_review_date DESC
        """
        stmt = (
            select(ItemProgressORM)
            .where(ItemProgressORM.user_id == user_id.value)
            .order_by(ItemProgressORM.last_review_date.desc(), ItemProgressORM.id.desc())
            .limit(limit)
            .offset(offset)
        )
        with storage_errors("progress listing"):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def count_by_user(self, user_id: UserId) -> int:
        stmt = select(func.count(ItemProgressORM.id)).where(
            ItemProgressORM.user_id == user_id.value
        )
        with storage_errors("progress count"):
            return self.db.execute(stmt).scalar() or 0

    def find_due(self, user_id: UserId, now: datetime, limit: int) -> list[ItemProgress]:
        """
        Get records due for review.

        Args:
            user_id: The user ID
            now: Reference time
            limit: Maximum number of records

        Returns:
            Records with due_date <= now, ordered by due_date ASC
        """
        stmt = (
            select(ItemProgressORM)
            .where(
                ItemProgressORM.user_id == user_id.value,
                ItemProgressORM.due_date <= now,
            )
            .order_by(ItemProgressORM.due_date.asc(), ItemProgressORM.id.asc())
            .limit(limit)
        )
        with storage_errors("due listing"):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def count_mastered(self, user_id: UserId) -> int:
        stmt = select(func.count(ItemProgressORM.id)).where(
            ItemProgressORM.user_id == user_id.value,
            ItemProgressORM.last_review_quality >= FULL_RECALL_QUALITY,
        )
        with storage_errors("mastered count"):
            return self.db.execute(stmt).scalar() or 0
