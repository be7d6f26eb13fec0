"""Fixtures wiring the in-memory learning ports."""

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
from studyledger.domain.common.value_objects import UserId
from studyledger.domain.learning.entities.study_streak import StudyStreak


@pytest.fixture
def unit_of_work() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog(items={"kanji-1", "kanji-2", "kanji-3"}, decks={"deck-n5"})


@pytest.fixture
def progress_repository() -> FakeProgressRepository:
    return FakeProgressRepository()


@pytest.fixture
def review_ledger() -> FakeReviewLedger:
    return FakeReviewLedger()


@pytest.fixture
def session_repository() -> FakeSessionRepository:
    return FakeSessionRepository()


@pytest.fixture
def streak_repository() -> FakeStreakRepository:
    return FakeStreakRepository({USER_ID: StudyStreak(id=UserId(USER_ID))})


@pytest.fixture
def stats_service(
    progress_repository: FakeProgressRepository,
    review_ledger: FakeReviewLedger,
    session_repository: FakeSessionRepository,
    streak_repository: FakeStreakRepository,
) -> LearnerStatsService:
    return LearnerStatsService(
        progress_repository=progress_repository,
        review_ledger=review_ledger,
        session_repository=session_repository,
        streak_repository=streak_repository,
    )


@pytest.fixture
def streak_tracker(
    streak_repository: FakeStreakRepository, unit_of_work: FakeUnitOfWork
) -> StreakTracker:
    return StreakTracker(streak_repository=streak_repository, unit_of_work=unit_of_work)
