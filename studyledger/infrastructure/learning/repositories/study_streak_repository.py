"""Repository for the streak columns of the users table."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from studyledger.domain.common.value_objects.ids import UserId
from studyledger.domain.identity.exceptions import UserNotFoundError
from studyledger.domain.learning.entities.study_streak import StudyStreak
from studyledger.infrastructure.common.storage import storage_errors
from studyledger.infrastructure.learning.mappers.study_streak_mapper import StudyStreakMapper
from studyledger.models import User as UserORM


class StudyStreakRepository:
    """Repository for StudyStreak domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = StudyStreakMapper()

    def find(self, user_id: UserId) -> StudyStreak | None:
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        with storage_errors("streak lookup"):
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_for_update(self, user_id: UserId) -> StudyStreak | None:
        """Read the streak of a user, locking the user row until the transaction ends."""
        stmt = select(UserORM).where(UserORM.id == user_id.value).with_for_update()
        with storage_errors("streak lookup"):
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, streak: StudyStreak) -> StudyStreak:
        """
        Write the streak back to the user row within the current transaction.

        Raises:
            UserNotFoundError: If the user row no longer exists
        """
        with storage_errors("streak update"):
            orm_model = self.db.get(UserORM, streak.id.value)
            if orm_model is None:
                raise UserNotFoundError(streak.id.value)
            self.mapper.to_orm(streak, orm_model)
            self.db.flush()
        return self.mapper.to_domain(orm_model)
