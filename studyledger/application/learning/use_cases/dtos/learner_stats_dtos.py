"""DTOs for learner statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class LearnerStatsSummary:
    """Aggregate stats returned after a batch submission."""

    total_items_studied: int
    total_sessions: int
    average_accuracy: int


@dataclass(frozen=True)
class DetailedLearnerStats:
    """Full statistics of a learner."""

    total_items_studied: int
    total_sessions: int
    average_accuracy: int
    total_reviews: int
    correct_reviews: int
    session_accuracy: int
    mastered_items: int
    streak: int
    last_study_date: date | None


@dataclass(frozen=True)
class DailyReviewCount:
    """Number of reviews on one UTC calendar day."""

    date: date
    count: int
