"""Repository for StudySession domain entities."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from studyledger.domain.common.value_objects.ids import UserId
from studyledger.domain.learning.entities.study_session import StudySession
from studyledger.infrastructure.common.storage import storage_errors
from studyledger.infrastructure.learning.mappers.study_session_mapper import StudySessionMapper
from studyledger.models import StudySession as StudySessionORM


class StudySessionRepository:
    """Repository for StudySession domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = StudySessionMapper()

    def save(self, session: StudySession) -> StudySession:
        """
        Insert a session summary within the current transaction.

        Args:
            session: The closed session (ID 0)

        Returns:
            Saved session with its database-generated ID
        """
        orm_model = self.mapper.to_orm(session)
        with storage_errors("session insert"):
            self.db.add(orm_model)
            self.db.flush()
            self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def count_by_user(self, user_id: UserId) -> int:
        stmt = select(func.count(StudySessionORM.id)).where(
            StudySessionORM.user_id == user_id.value
        )
        with storage_errors("session count"):
            return self.db.execute(stmt).scalar() or 0

    def totals_by_user(self, user_id: UserId) -> tuple[int, int]:
        """
        Sum review and correct counts over all sessions of a user.

        Returns:
            Tuple of (total_reviews, correct_reviews)
        """
        stmt = select(
            func.coalesce(func.sum(StudySessionORM.review_count), 0),
            func.coalesce(func.sum(StudySessionORM.correct_count), 0),
        ).where(StudySessionORM.user_id == user_id.value)
        with storage_errors("session totals"):
            total_reviews, correct_reviews = self.db.execute(stmt).one()
        return int(total_reviews), int(correct_reviews)
