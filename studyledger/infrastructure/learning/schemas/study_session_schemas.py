"""Pydantic schemas for study session submission."""

from datetime import datetime

from pydantic import Field

from studyledger.infrastructure.common.schemas import CamelModel


class ReviewHistoryEntry(CamelModel):
    """One reviewed item as sent by the study client."""

    item_id: str = Field(..., description="Catalog ID of the reviewed item")
    quality: int = Field(..., description="Recall score between 0 and 5")
    timestamp: datetime | None = Field(None, description="When the item was reviewed")
    elapsed_ms: int = Field(0, description="Time spent on the item in milliseconds")
    previous_interval: int | None = Field(None, description="Client-side interval before review")
    new_interval: int | None = Field(None, description="Client-side interval after review")
    previous_ease_factor: int | None = Field(
        None, description="Client-side ease factor before review"
    )
    new_ease_factor: int | None = Field(None, description="Client-side ease factor after review")


class StudySessionRequest(CamelModel):
    """Schema for submitting the reviews of a finished study session."""

    review_history: list[ReviewHistoryEntry] = Field(
        ..., description="Reviews in the order they happened"
    )
    total_time: int = Field(0, description="Duration of the session in milliseconds")
    deck_id: str | None = Field(None, description="Optional deck the session was studied from")
    study_mode: str | None = Field(None, description="Study mode, defaults to 'standard'")


class FailedReview(CamelModel):
    """A review that could not be committed."""

    item_id: str
    error_type: str
    error: str


class LearnerStatsSummary(CamelModel):
    total_items_studied: int = Field(..., description="Number of items with a progress record")
    total_sessions: int = Field(..., description="Number of submitted study sessions")
    average_accuracy: int = Field(..., description="Average review quality as a percentage")


class StudySessionResponse(CamelModel):
    """Schema for the study session submission response."""

    success: bool = Field(..., description="Whether at least one review was committed")
    message: str = Field(..., description="Response message")
    session_id: int = Field(..., description="ID of the stored session summary")
    review_entries: int = Field(..., description="Number of reviews written to the ledger")
    failed_reviews: list[FailedReview] | None = Field(
        None, description="Reviews that could not be committed, if any"
    )
    stats: LearnerStatsSummary | None = Field(
        None, description="Refreshed learner stats, omitted when they could not be read"
    )
    streak_updated: bool = Field(True, description="Whether the study streak was updated")


class StudySessionFailureResponse(CamelModel):
    """Schema for a submission in which no review could be committed."""

    success: bool = False
    error: str
    failed_reviews: list[FailedReview]
