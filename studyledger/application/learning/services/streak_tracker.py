"""Application service for per-user study streaks."""

from datetime import date

import structlog

from studyledger.application.common.unit_of_work import UnitOfWork
from studyledger.application.learning.protocols.streak_repository import (
    StreakRepositoryProtocol,
)
from studyledger.domain.common.value_objects.ids import UserId
from studyledger.domain.identity.exceptions import UserNotFoundError
from studyledger.domain.learning.entities.study_streak import StudyStreak

logger = structlog.get_logger(__name__)


class StreakTracker:
    """Maintains the consecutive-study-days counter of each user."""

    def __init__(
        self,
        streak_repository: StreakRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.streak_repository = streak_repository
        self.unit_of_work = unit_of_work

    def touch(self, user_id: UserId, today: date) -> StudyStreak:
        """
        Register study activity of a user on `today` (UTC calendar date).

        Runs in its own transaction with the streak row locked, so concurrent
        batches of the same user are applied one after another.

        Raises:
            UserNotFoundError: If the user does not exist
            PersistenceError: If the streak cannot be stored
        """
        with self.unit_of_work:
            streak = self.streak_repository.find_for_update(user_id)
            if streak is None:
                raise UserNotFoundError(user_id.value)

            previous = streak.streak
            if streak.touch(today):
                streak = self.streak_repository.save(streak)
            self.unit_of_work.commit()

        logger.info(
            "touched_study_streak",
            user_id=user_id.value,
            previous_streak=previous,
            streak=streak.streak,
            study_date=today.isoformat(),
        )
        return streak
