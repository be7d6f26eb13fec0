"""Tests for SubmitStudySessionUseCase with in-memory ports."""

from datetime import UTC, date, datetime, timedelta

import pytest
from learning_fakes import (
    USER_ID,
    FakeCatalog,
    FakeProgressRepository,
    FakeReviewLedger,
    FakeSessionRepository,
    FakeStreakRepository,
    FakeUnitOfWork,
)

from studyledger.application.learning.services.learner_stats_service import LearnerStatsService
from studyledger.application.learning.services.streak_tracker import StreakTracker
from studyledger.application.learning.use_cases.dtos.study_session_dtos import (
    ReviewSubmission,
    StudySessionSubmission,
)
from studyledger.application.learning.use_cases.study_sessions.submit_study_session_use_case import (  # noqa: E501
    SubmitStudySessionUseCase,
)
from studyledger.domain.common.value_objects import UserId
from studyledger.domain.learning.entities.study_streak import StudyStreak
from studyledger.domain.learning.services.scheduler import ReviewStatus
from studyledger.exceptions import (
    ConcurrentUpdateError,
    PersistenceError,
    ReferentialError,
    TotalFailureError,
    ValidationError,
)


@pytest.fixture
def use_case(
    catalog: FakeCatalog,
    progress_repository: FakeProgressRepository,
    review_ledger: FakeReviewLedger,
    session_repository: FakeSessionRepository,
    streak_tracker: StreakTracker,
    stats_service: LearnerStatsService,
    unit_of_work: FakeUnitOfWork,
) -> SubmitStudySessionUseCase:
    return SubmitStudySessionUseCase(
        catalog=catalog,
        progress_repository=progress_repository,
        review_ledger=review_ledger,
        session_repository=session_repository,
        streak_tracker=streak_tracker,
        stats_service=stats_service,
        unit_of_work=unit_of_work,
        max_reviews_per_batch=5,
        default_study_mode="standard",
    )


def _batch(*reviews: tuple[str, int], **kwargs: object) -> StudySessionSubmission:
    return StudySessionSubmission(
        reviews=[ReviewSubmission(item_id=item_id, quality=quality) for item_id, quality in reviews],
        total_time_ms=kwargs.pop("total_time_ms", 60_000),  # type: ignore[arg-type]
        **kwargs,  # type: ignore[arg-type]
    )


class TestSuccessfulSubmission:
    def test_all_reviews_committed(
        self,
        use_case: SubmitStudySessionUseCase,
        review_ledger: FakeReviewLedger,
        session_repository: FakeSessionRepository,
    ) -> None:
        result = use_case.submit(USER_ID, _batch(("kanji-1", 4), ("kanji-2", 2)))

        assert result.review_entries == 2
        assert result.failures == []
        assert len(review_ledger.events) == 2
        assert result.stats.total_items_studied == 2
        assert result.stats.total_sessions == 1
        # (4 + 2) / 2 = 3 -> 60%
        assert result.stats.average_accuracy == 60

        session = session_repository.sessions[0]
        assert session.review_count == 2
        assert session.correct_count == 1
        assert session.study_mode == "standard"
        assert session.duration_seconds == 60

    def test_first_review_recorded_in_ledger(
        self, use_case: SubmitStudySessionUseCase, review_ledger: FakeReviewLedger
    ) -> None:
        use_case.submit(USER_ID, _batch(("kanji-1", 4)))

        event = review_ledger.events[0]
        assert event.previous_interval == 0
        assert event.new_interval == 1
        assert event.previous_ease_factor == 250
        assert event.new_ease_factor == 260

    def test_server_schedule_wins_over_client_hints(
        self, use_case: SubmitStudySessionUseCase, review_ledger: FakeReviewLedger
    ) -> None:
        submission = StudySessionSubmission(
            reviews=[
                ReviewSubmission(
                    item_id="kanji-1",
                    quality=4,
                    previous_interval=10,
                    new_interval=25,
                    previous_ease_factor=300,
                    new_ease_factor=310,
                )
            ],
            total_time_ms=1000,
        )

        use_case.submit(USER_ID, submission)

        assert review_ledger.events[0].new_interval == 1
        assert review_ledger.events[0].new_ease_factor == 260

    def test_same_item_twice_in_one_batch(
        self, use_case: SubmitStudySessionUseCase, progress_repository: FakeProgressRepository
    ) -> None:
        result = use_case.submit(USER_ID, _batch(("kanji-1", 4), ("kanji-1", 4)))

        assert result.review_entries == 2
        progress = progress_repository.records[(USER_ID, "kanji-1")]
        assert progress.review_count == 2
        assert progress.ease_factor == 270
        assert progress.status == ReviewStatus.LEARNING

    def test_client_timestamp_used_as_review_date(
        self, use_case: SubmitStudySessionUseCase, review_ledger: FakeReviewLedger
    ) -> None:
        reviewed_at = datetime(2026, 3, 1, 9, 30)  # naive, taken as UTC
        submission = StudySessionSubmission(
            reviews=[ReviewSubmission(item_id="kanji-1", quality=5, timestamp=reviewed_at)],
            total_time_ms=0,
        )

        use_case.submit(USER_ID, submission)

        assert review_ledger.events[0].review_date == reviewed_at.replace(tzinfo=UTC)

    def test_deck_and_study_mode_recorded(
        self, use_case: SubmitStudySessionUseCase, session_repository: FakeSessionRepository
    ) -> None:
        use_case.submit(USER_ID, _batch(("kanji-1", 4), deck_id="deck-n5", study_mode="writing"))

        session = session_repository.sessions[0]
        assert session.deck_id is not None
        assert session.deck_id.value == "deck-n5"
        assert session.study_mode == "writing"


class TestPartialFailure:
    def test_unknown_item_reported_and_others_committed(
        self, use_case: SubmitStudySessionUseCase, review_ledger: FakeReviewLedger
    ) -> None:
        result = use_case.submit(
            USER_ID, _batch(("kanji-1", 4), ("missing", 4), ("kanji-3", 3))
        )

        assert result.review_entries == 2
        assert len(result.failures) == 1
        failure = result.failures[0]
        assert failure.item_id == "missing"
        assert isinstance(failure.error, ReferentialError)
        assert failure.error_type == "ReferentialError"
        assert [e.item_id.value for e in review_ledger.events] == ["kanji-1", "kanji-3"]

    def test_storage_failure_is_per_item(
        self,
        use_case: SubmitStudySessionUseCase,
        progress_repository: FakeProgressRepository,
        unit_of_work: FakeUnitOfWork,
    ) -> None:
        progress_repository.failing_items.add("kanji-2")

        result = use_case.submit(USER_ID, _batch(("kanji-1", 4), ("kanji-2", 4), ("kanji-3", 4)))

        assert result.review_entries == 2
        assert [f.item_id for f in result.failures] == ["kanji-2"]
        assert isinstance(result.failures[0].error, PersistenceError)
        assert unit_of_work.rollbacks == 1

    def test_ledger_failure_is_per_item(
        self, use_case: SubmitStudySessionUseCase, review_ledger: FakeReviewLedger
    ) -> None:
        review_ledger.failing_items.add("kanji-1")

        result = use_case.submit(USER_ID, _batch(("kanji-1", 4), ("kanji-2", 4)))

        assert result.review_entries == 1
        assert result.failures[0].item_id == "kanji-1"

    def test_session_summary_counts_submitted_reviews(
        self, use_case: SubmitStudySessionUseCase, session_repository: FakeSessionRepository
    ) -> None:
        use_case.submit(USER_ID, _batch(("kanji-1", 4), ("missing", 5)))

        session = session_repository.sessions[0]
        assert session.review_count == 2
        assert session.correct_count == 2


class TestConcurrentInsert:
    def test_lost_insert_race_is_retried_once(
        self,
        use_case: SubmitStudySessionUseCase,
        progress_repository: FakeProgressRepository,
    ) -> None:
        progress_repository.contended_items["kanji-1"] = 1

        result = use_case.submit(USER_ID, _batch(("kanji-1", 4)))

        assert result.review_entries == 1
        assert progress_repository.upsert_calls["kanji-1"] == 2

    def test_repeated_contention_reported_as_failure(
        self,
        use_case: SubmitStudySessionUseCase,
        progress_repository: FakeProgressRepository,
    ) -> None:
        progress_repository.contended_items["kanji-1"] = 2

        result = use_case.submit(USER_ID, _batch(("kanji-1", 4), ("kanji-2", 4)))

        assert result.review_entries == 1
        assert isinstance(result.failures[0].error, ConcurrentUpdateError)
        assert progress_repository.upsert_calls["kanji-1"] == 2


class TestTotalFailure:
    def test_no_committed_review_raises(self, use_case: SubmitStudySessionUseCase) -> None:
        with pytest.raises(TotalFailureError) as exc_info:
            use_case.submit(USER_ID, _batch(("missing-1", 4), ("missing-2", 4)))

        assert [item_id for item_id, _ in exc_info.value.failures] == ["missing-1", "missing-2"]
        assert exc_info.value.status_code == 500

    def test_streak_not_touched_on_total_failure(
        self, use_case: SubmitStudySessionUseCase, streak_repository: FakeStreakRepository
    ) -> None:
        with pytest.raises(TotalFailureError):
            use_case.submit(USER_ID, _batch(("missing", 4)))

        assert streak_repository.locked_reads == 0
        assert streak_repository.streaks[USER_ID].streak == 0


class TestBatchValidation:
    def test_too_many_reviews(
        self, use_case: SubmitStudySessionUseCase, session_repository: FakeSessionRepository
    ) -> None:
        with pytest.raises(ValidationError):
            use_case.submit(USER_ID, _batch(*[("kanji-1", 4)] * 6))

        assert session_repository.sessions == []

    def test_unknown_deck(
        self, use_case: SubmitStudySessionUseCase, session_repository: FakeSessionRepository
    ) -> None:
        with pytest.raises(ValidationError):
            use_case.submit(USER_ID, _batch(("kanji-1", 4), deck_id="deck-unknown"))

        assert session_repository.sessions == []

    def test_session_storage_failure_aborts_batch(
        self,
        use_case: SubmitStudySessionUseCase,
        session_repository: FakeSessionRepository,
        review_ledger: FakeReviewLedger,
    ) -> None:
        session_repository.fail = True

        with pytest.raises(PersistenceError):
            use_case.submit(USER_ID, _batch(("kanji-1", 4)))

        assert review_ledger.events == []


class TestStreak:
    def test_streak_touched_once_per_batch(
        self, use_case: SubmitStudySessionUseCase, streak_repository: FakeStreakRepository
    ) -> None:
        use_case.submit(USER_ID, _batch(("kanji-1", 4), ("kanji-2", 4), ("kanji-3", 4)))

        assert streak_repository.locked_reads == 1
        assert streak_repository.streaks[USER_ID].streak == 1

    def test_streak_continues_from_yesterday(
        self, use_case: SubmitStudySessionUseCase, streak_repository: FakeStreakRepository
    ) -> None:
        today = datetime.now(UTC).date()
        streak_repository.streaks[USER_ID] = StudyStreak(
            id=UserId(USER_ID), streak=3, last_study_date=today - timedelta(days=1)
        )

        use_case.submit(USER_ID, _batch(("kanji-1", 4)))
        use_case.submit(USER_ID, _batch(("kanji-2", 4)))

        streak = streak_repository.streaks[USER_ID]
        assert streak.streak == 4
        assert streak.last_study_date == today
        assert streak_repository.saves == 1

    def test_streak_restarts_after_gap(
        self, use_case: SubmitStudySessionUseCase, streak_repository: FakeStreakRepository
    ) -> None:
        streak_repository.streaks[USER_ID] = StudyStreak(
            id=UserId(USER_ID), streak=7, last_study_date=date(2020, 1, 1)
        )

        use_case.submit(USER_ID, _batch(("kanji-1", 4)))

        assert streak_repository.streaks[USER_ID].streak == 1


class TestFailuresAfterCommit:
    def test_streak_storage_failure_keeps_committed_reviews(
        self,
        use_case: SubmitStudySessionUseCase,
        review_ledger: FakeReviewLedger,
        streak_repository: FakeStreakRepository,
        unit_of_work: FakeUnitOfWork,
    ) -> None:
        streak_repository.fail_saves = True

        result = use_case.submit(USER_ID, _batch(("kanji-1", 4)))

        assert result.review_entries == 1
        assert result.failures == []
        assert result.streak_updated is False
        assert len(review_ledger.events) == 1
        assert result.stats is not None
        assert result.stats.total_items_studied == 1
        assert unit_of_work.rollbacks == 1

    def test_missing_streak_row_keeps_committed_reviews(
        self,
        use_case: SubmitStudySessionUseCase,
        review_ledger: FakeReviewLedger,
        streak_repository: FakeStreakRepository,
    ) -> None:
        streak_repository.streaks.clear()

        result = use_case.submit(USER_ID, _batch(("kanji-1", 4), ("kanji-2", 2)))

        assert result.review_entries == 2
        assert result.streak_updated is False
        assert len(review_ledger.events) == 2

    def test_stats_failure_returns_result_without_stats(
        self,
        use_case: SubmitStudySessionUseCase,
        review_ledger: FakeReviewLedger,
        streak_repository: FakeStreakRepository,
    ) -> None:
        review_ledger.fail_reads = True

        result = use_case.submit(USER_ID, _batch(("kanji-1", 4)))

        assert result.review_entries == 1
        assert result.stats is None
        assert result.streak_updated is True
        assert streak_repository.streaks[USER_ID].streak == 1
