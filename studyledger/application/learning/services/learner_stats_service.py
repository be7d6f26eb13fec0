"""Application service computing learner statistics from the ledger."""

from datetime import UTC, date, datetime, time, timedelta

from studyledger.application.learning.protocols.item_progress_repository import (
    ItemProgressRepositoryProtocol,
)
from studyledger.application.learning.protocols.review_ledger import ReviewLedgerProtocol
from studyledger.application.learning.protocols.streak_repository import (
    StreakRepositoryProtocol,
)
from studyledger.application.learning.protocols.study_session_repository import (
    StudySessionRepositoryProtocol,
)
from studyledger.application.learning.use_cases.dtos.learner_stats_dtos import (
    DailyReviewCount,
    DetailedLearnerStats,
    LearnerStatsSummary,
)
from studyledger.domain.common.value_objects.ids import UserId
from studyledger.domain.identity.exceptions import UserNotFoundError
from studyledger.domain.learning.services.scheduler import MAX_QUALITY


def percentage(numerator: int, denominator: int) -> int:
    """Integer percentage rounded half up, 0 when there is nothing to divide."""
    if denominator <= 0:
        return 0
    return (200 * numerator + denominator) // (2 * denominator)


def quality_accuracy(average_quality: float | None) -> int:
    """Map an average 0-5 quality to a 0-100 accuracy, rounded half up."""
    if average_quality is None:
        return 0
    return int(average_quality * 100 / MAX_QUALITY + 0.5)


def day_window(days: int, today: date) -> tuple[datetime, datetime]:
    """UTC [start, end) covering the `days` calendar days ending with `today`."""
    start = datetime.combine(today - timedelta(days=days - 1), time.min, tzinfo=UTC)
    end = datetime.combine(today + timedelta(days=1), time.min, tzinfo=UTC)
    return start, end


class LearnerStatsService:
    """Read side over progress records, the review ledger and session summaries."""

    def __init__(
        self,
        progress_repository: ItemProgressRepositoryProtocol,
        review_ledger: ReviewLedgerProtocol,
        session_repository: StudySessionRepositoryProtocol,
        streak_repository: StreakRepositoryProtocol,
    ) -> None:
        self.progress_repository = progress_repository
        self.review_ledger = review_ledger
        self.session_repository = session_repository
        self.streak_repository = streak_repository

    def summary(self, user_id: UserId) -> LearnerStatsSummary:
        """Stats returned after each batch submission."""
        return LearnerStatsSummary(
            total_items_studied=self.progress_repository.count_by_user(user_id),
            total_sessions=self.session_repository.count_by_user(user_id),
            average_accuracy=quality_accuracy(self.review_ledger.average_quality(user_id)),
        )

    def detailed(self, user_id: UserId) -> DetailedLearnerStats:
        """
        Summary stats plus session totals, mastery and streak.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        streak = self.streak_repository.find(user_id)
        if streak is None:
            raise UserNotFoundError(user_id.value)

        summary = self.summary(user_id)
        total_reviews, correct_reviews = self.session_repository.totals_by_user(user_id)
        return DetailedLearnerStats(
            total_items_studied=summary.total_items_studied,
            total_sessions=summary.total_sessions,
            average_accuracy=summary.average_accuracy,
            total_reviews=total_reviews,
            correct_reviews=correct_reviews,
            session_accuracy=percentage(correct_reviews, total_reviews),
            mastered_items=self.progress_repository.count_mastered(user_id),
            streak=streak.streak,
            last_study_date=streak.last_study_date,
        )

    def review_history(self, user_id: UserId, days: int, today: date) -> list[DailyReviewCount]:
        """
        Review counts per UTC day, oldest first.

        Days without reviews are included with a count of 0, so the result
        always has exactly `days` entries.
        """
        start, end = day_window(days, today)
        counts = dict.fromkeys((start.date() + timedelta(days=n) for n in range(days)), 0)
        for event in self.review_ledger.query_by_user_and_date_range(user_id, start, end):
            day = event.review_date.astimezone(UTC).date()
            if day in counts:
                counts[day] += 1
        return [DailyReviewCount(date=day, count=count) for day, count in counts.items()]
