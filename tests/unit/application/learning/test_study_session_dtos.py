"""Tests for batch validation at the DTO boundary."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from studyledger.application.learning.use_cases.dtos.study_session_dtos import (
    ReviewSubmission,
    StudySessionSubmission,
)
from studyledger.exceptions import ValidationError


class TestReviewSubmission:
    @pytest.mark.parametrize("quality", [-1, 6])
    def test_quality_out_of_range(self, quality: int) -> None:
        with pytest.raises(ValidationError):
            ReviewSubmission(item_id="kanji-1", quality=quality)

    def test_quality_must_be_integer(self) -> None:
        with pytest.raises(ValidationError):
            ReviewSubmission(item_id="kanji-1", quality=True)

    @pytest.mark.parametrize("item_id", ["", "   "])
    def test_item_id_required(self, item_id: str) -> None:
        with pytest.raises(ValidationError):
            ReviewSubmission(item_id=item_id, quality=3)

    def test_negative_elapsed_time(self) -> None:
        with pytest.raises(ValidationError):
            ReviewSubmission(item_id="kanji-1", quality=3, elapsed_ms=-5)

    def test_timestamp_normalized_to_utc(self) -> None:
        tokyo = timezone(timedelta(hours=9))
        review = ReviewSubmission(
            item_id="kanji-1", quality=3, timestamp=datetime(2026, 3, 2, 8, 0, tzinfo=tokyo)
        )

        assert review.reviewed_at == datetime(2026, 3, 1, 23, 0, tzinfo=UTC)

    def test_missing_timestamp(self) -> None:
        assert ReviewSubmission(item_id="kanji-1", quality=3).reviewed_at is None


class TestStudySessionSubmission:
    def test_empty_batch_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StudySessionSubmission(reviews=[], total_time_ms=0)

    def test_negative_total_time_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StudySessionSubmission(
                reviews=[ReviewSubmission(item_id="kanji-1", quality=3)], total_time_ms=-1
            )

    def test_blank_study_mode_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StudySessionSubmission(
                reviews=[ReviewSubmission(item_id="kanji-1", quality=3)],
                total_time_ms=0,
                study_mode=" ",
            )

    def test_correct_count(self) -> None:
        submission = StudySessionSubmission(
            reviews=[
                ReviewSubmission(item_id="kanji-1", quality=quality) for quality in [0, 2, 3, 5]
            ],
            total_time_ms=0,
        )

        assert submission.correct_count == 2
