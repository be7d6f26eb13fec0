"""Protocol for study session summaries."""

from typing import Protocol

from studyledger.domain.common.value_objects.ids import UserId
from studyledger.domain.learning.entities.study_session import StudySession


class StudySessionRepositoryProtocol(Protocol):
    def save(self, session: StudySession) -> StudySession: ...

    def count_by_user(self, user_id: UserId) -> int: ...

    def totals_by_user(self, user_id: UserId) -> tuple[int, int]:
        """Sum of (review_count, correct_count) over all sessions of a user."""
        ...
