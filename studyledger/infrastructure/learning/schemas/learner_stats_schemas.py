"""Pydantic schemas for learner statistics and progress."""

import datetime

from pydantic import Field

from studyledger.infrastructure.common.schemas import CamelModel


class LearnerStatsResponse(CamelModel):
    """Schema for the detailed statistics of the current user."""

    total_items_studied: int
    total_sessions: int
    average_accuracy: int = Field(..., description="Average review quality as a percentage")
    total_reviews: int = Field(..., description="Reviews submitted over all sessions")
    correct_reviews: int = Field(..., description="Passing reviews submitted over all sessions")
    session_accuracy: int = Field(..., description="correct_reviews / total_reviews as a percentage")
    mastered_items: int = Field(..., description="Items whose last review was a full recall")
    streak: int = Field(..., description="Consecutive UTC days with at least one review")
    last_study_date: datetime.date | None


class DailyReviewCount(CamelModel):
    date: datetime.date
    count: int


class ReviewHistoryResponse(CamelModel):
    """Schema for review counts per day, oldest first."""

    days: int
    history: list[DailyReviewCount]


class ItemProgress(CamelModel):
    """Schema for a progress record."""

    item_id: str
    status: str
    interval: int = Field(..., description="Days until the next review")
    ease_factor: int = Field(..., description="Ease factor times 100")
    due_date: datetime.datetime
    review_count: int
    correct_count: int
    incorrect_count: int
    last_review_date: datetime.datetime
    last_review_quality: int | None


class DueItemsResponse(CamelModel):
    items: list[ItemProgress]
    count: int
