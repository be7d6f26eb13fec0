"""
StudySession entity - summary row of one batch submission.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from studyledger.domain.common.entity import Entity
from studyledger.domain.common.exceptions import DomainError
from studyledger.domain.common.value_objects import DeckId, StudySessionId, UserId


@dataclass(frozen=True)
class StudySession(Entity[StudySessionId]):
    """
    Study session summary.

    Business Rules:
    - Created once per batch submission and closed immediately
    - Start time must not be after end time
    - correct_count <= review_count
    """

    id: StudySessionId
    user_id: UserId
    start_time: datetime
    end_time: datetime
    review_count: int
    correct_count: int
    study_mode: str
    deck_id: DeckId | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.end_time < self.start_time:
            raise DomainError("End time must be after start time")
        if self.review_count < 0 or self.correct_count < 0:
            raise DomainError("Review counts cannot be negative")
        if self.correct_count > self.review_count:
            raise DomainError("Correct count cannot exceed review count")
        if not self.study_mode or not self.study_mode.strip():
            raise DomainError("Study mode cannot be empty")

    @property
    def duration_seconds(self) -> int:
        """Session duration in whole seconds."""
        return int((self.end_time - self.start_time).total_seconds())

    @classmethod
    def close(
        cls,
        user_id: UserId,
        submitted_at: datetime,
        total_time_ms: int,
        review_count: int,
        correct_count: int,
        study_mode: str,
        deck_id: DeckId | None = None,
    ) -> "StudySession":
        """
        Build the summary for a batch submitted at `submitted_at`.

        The session is considered to have started `total_time_ms`
        milliseconds before submission.
        """
        return cls(
            id=StudySessionId.generate(),
            user_id=user_id,
            start_time=submitted_at - timedelta(milliseconds=total_time_ms),
            end_time=submitted_at,
            review_count=review_count,
            correct_count=correct_count,
            study_mode=study_mode.strip(),
            deck_id=deck_id,
        )
