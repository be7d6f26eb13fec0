"""Protocol for per-user study streaks."""

from typing import Protocol

from studyledger.domain.common.value_objects.ids import UserId
from studyledger.domain.learning.entities.study_streak import StudyStreak


class StreakRepositoryProtocol(Protocol):
    def find(self, user_id: UserId) -> StudyStreak | None: ...

    def find_for_update(self, user_id: UserId) -> StudyStreak | None:
        """Read the streak and lock it until the current transaction ends."""
        ...

    def save(self, streak: StudyStreak) -> StudyStreak: ...
