from .learner_stats_dtos import DailyReviewCount, DetailedLearnerStats, LearnerStatsSummary
from .study_session_dtos import (
    ReviewFailure,
    ReviewSubmission,
    StudySessionResult,
    StudySessionSubmission,
)

__all__ = [
    "DailyReviewCount",
    "DetailedLearnerStats",
    "LearnerStatsSummary",
    "ReviewFailure",
    "ReviewSubmission",
    "StudySessionResult",
    "StudySessionSubmission",
]
