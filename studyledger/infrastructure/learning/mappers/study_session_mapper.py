"""Mapper for StudySession ORM ↔ Domain conversion."""

from studyledger.domain.common.value_objects import DeckId, StudySessionId, UserId
from studyledger.domain.learning.entities.study_session import StudySession
from studyledger.infrastructure.common.storage import as_utc
from studyledger.models import StudySession as StudySessionORM


class StudySessionMapper:
    """Mapper for StudySession ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: StudySessionORM) -> StudySession:
        """Convert ORM model to domain entity."""
        return StudySession(
            id=StudySessionId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            start_time=as_utc(orm_model.start_time),
            end_time=as_utc(orm_model.end_time),
            review_count=orm_model.review_count,
            correct_count=orm_model.correct_count,
            study_mode=orm_model.study_mode,
            deck_id=DeckId(orm_model.deck_id) if orm_model.deck_id else None,
        )

    def to_orm(self, domain_entity: StudySession) -> StudySessionORM:
        """Convert domain entity to a new ORM model (sessions are never updated)."""
        return StudySessionORM(
            user_id=domain_entity.user_id.value,
            deck_id=domain_entity.deck_id.value if domain_entity.deck_id else None,
            start_time=domain_entity.start_time,
            end_time=domain_entity.end_time,
            review_count=domain_entity.review_count,
            correct_count=domain_entity.correct_count,
            study_mode=domain_entity.study_mode,
        )
