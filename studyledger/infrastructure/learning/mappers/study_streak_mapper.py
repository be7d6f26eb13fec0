"""Mapper between the streak columns of the users table and StudyStreak."""

from studyledger.domain.common.value_objects import UserId
from studyledger.domain.learning.entities.study_streak import StudyStreak
from studyledger.models import User as UserORM


class StudyStreakMapper:
    def to_domain(self, orm_model: UserORM) -> StudyStreak:
        return StudyStreak(
            id=UserId(orm_model.id),
            streak=orm_model.streak or 0,
            last_study_date=orm_model.last_study_date,
        )

    def to_orm(self, domain_entity: StudyStreak, orm_model: UserORM) -> UserORM:
        orm_model.streak = domain_entity.streak
        orm_model.last_study_date = domain_entity.last_study_date
        return orm_model
