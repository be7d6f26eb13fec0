"""DTOs for study session submission."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from studyledger.domain.learning.entities.review_event import ReviewEvent
from studyledger.domain.learning.entities.study_session import StudySession
from studyledger.domain.learning.services.scheduler import (
    MAX_QUALITY,
    MIN_QUALITY,
    is_correct,
)
from studyledger.exceptions import StudyLedgerError, ValidationError

from .learner_stats_dtos import LearnerStatsSummary


@dataclass(frozen=True)
class ReviewSubmission:
    """
    One review of a submitted batch.

    The schedule fields are what the client computed locally. They are kept
    for diagnostics only; the stored schedule is always computed server side.
    """

    item_id: str
    quality: int
    timestamp: datetime | None = None
    elapsed_ms: int = 0
    previous_interval: int | None = None
    new_interval: int | None = None
    previous_ease_factor: int | None = None
    new_ease_factor: int | None = None

    def __post_init__(self) -> None:
        if not self.item_id or not self.item_id.strip():
            raise ValidationError("Every review must have an itemId")
        # bool is an int subclass but not a quality score
        if isinstance(self.quality, bool) or not isinstance(self.quality, int):
            raise ValidationError(f"Quality of item {self.item_id} must be an integer")
        if not MIN_QUALITY <= self.quality <= MAX_QUALITY:
            raise ValidationError(
                f"Quality of item {self.item_id} must be between "
                f"{MIN_QUALITY} and {MAX_QUALITY}, got {self.quality}"
            )
        if self.elapsed_ms < 0:
            raise ValidationError(f"Elapsed time of item {self.item_id} cannot be negative")

    @property
    def reviewed_at(self) -> datetime | None:
        """Client timestamp in UTC; naive timestamps are taken as UTC."""
        if self.timestamp is None:
            return None
        if self.timestamp.tzinfo is None:
            return self.timestamp.replace(tzinfo=UTC)
        return self.timestamp.astimezone(UTC)

    @property
    def is_correct(self) -> bool:
        return is_correct(self.quality)


@dataclass(frozen=True)
class StudySessionSubmission:
    """A batch of reviews submitted at the end of a study session."""

    reviews: list[ReviewSubmission]
    total_time_ms: int
    deck_id: str | None = None
    study_mode: str | None = None

    def __post_init__(self) -> None:
        if not self.reviews:
            raise ValidationError("Review history cannot be empty")
        if self.total_time_ms < 0:
            raise ValidationError("Total time cannot be negative")
        if self.deck_id is not None and not self.deck_id.strip():
            raise ValidationError("Deck id cannot be blank")
        if self.study_mode is not None and not self.study_mode.strip():
            raise ValidationError("Study mode cannot be blank")

    @property
    def correct_count(self) -> int:
        """Naive count of passing reviews in the submitted batch."""
        return sum(1 for review in self.reviews if review.is_correct)


@dataclass(frozen=True)
class ReviewFailure:
    """A review of the batch that could not be committed."""

    item_id: str
    error: StudyLedgerError

    @property
    def error_type(self) -> str:
        return type(self.error).__name__

    @property
    def message(self) -> str:
        return self.error.message


@dataclass
class StudySessionResult:
    """Outcome of a batch submission with at least one committed review."""

    session: StudySession
    stats: LearnerStatsSummary | None
    committed: list[ReviewEvent] = field(default_factory=list)
    failures: list[ReviewFailure] = field(default_factory=list)
    streak_updated: bool = True

    @property
    def review_entries(self) -> int:
        """Number of reviews written to the ledger."""
        return len(self.committed)
