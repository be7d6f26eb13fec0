"""Learning infrastructure schemas."""

from studyledger.infrastructure.learning.schemas.learner_stats_schemas import (
    DailyReviewCount,
    DueItemsResponse,
    ItemProgress,
    LearnerStatsResponse,
    ReviewHistoryResponse,
)
from studyledger.infrastructure.learning.schemas.study_session_schemas import (
    FailedReview,
    LearnerStatsSummary,
    ReviewHistoryEntry,
    StudySessionFailureResponse,
    StudySessionRequest,
    StudySessionResponse,
)

__all__ = [
    "DailyReviewCount",
    "DueItemsResponse",
    "FailedReview",
    "ItemProgress",
    "LearnerStatsResponse",
    "LearnerStatsSummary",
    "ReviewHistoryEntry",
    "ReviewHistoryResponse",
    "StudySessionFailureResponse",
    "StudySessionRequest",
    "StudySessionResponse",
]
