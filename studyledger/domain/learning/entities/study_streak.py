"""
StudyStreak entity - consecutive study days of a user.
"""

from dataclasses import dataclass
from datetime import date, timedelta

from studyledger.domain.common.entity import Entity
from studyledger.domain.common.exceptions import DomainError
from studyledger.domain.common.value_objects import UserId


@dataclass
class StudyStreak(Entity[UserId]):
    """
    Per-user streak of consecutive calendar days with a committed review.

    Keyed by the user's id: a user has exactly one streak.
    """

    id: UserId
    streak: int = 0
    last_study_date: date | None = None

    def __post_init__(self) -> None:
        if self.streak < 0:
            raise DomainError("Streak cannot be negative")

    def touch(self, today: date) -> bool:
        """
        Register study activity on `today`.

        Returns:
            True if the streak state changed, False for a same-day repeat
        """
        if self.last_study_date == today:
            return False
        if self.last_study_date == today - timedelta(days=1):
            self.streak += 1
        else:
            self.streak = 1
        self.last_study_date = today
        return True
