"""Use case for committing a batch of reviews submitted at the end of a study session."""

from datetime import UTC, datetime

import structlog

from studyledger.application.common.result import Failure, Result, Success
from studyledger.application.common.unit_of_work import UnitOfWork
from studyledger.application.learning.protocols.item_catalog import ItemCatalogProtocol
from studyledger.application.learning.protocols.item_progress_repository import (
    ItemProgressRepositoryProtocol,
)
from studyledger.application.learning.protocols.review_ledger import ReviewLedgerProtocol
from studyledger.application.learning.protocols.study_session_repository import (
    StudySessionRepositoryProtocol,
)
from studyledger.application.learning.services.learner_stats_service import (
    LearnerStatsService,
)
from studyledger.application.learning.services.streak_tracker import StreakTracker
from studyledger.application.learning.use_cases.dtos.learner_stats_dtos import (
    LearnerStatsSummary,
)
from studyledger.application.learning.use_cases.dtos.study_session_dtos import (
    ReviewFailure,
    ReviewSubmission,
    StudySessionResult,
    StudySessionSubmission,
)
from studyledger.domain.common.exceptions import DomainError
from studyledger.domain.common.value_objects.ids import DeckId, ItemId, UserId
from studyledger.domain.learning.entities.review_event import ReviewEvent
from studyledger.domain.learning.entities.study_session import StudySession
from studyledger.domain.learning.events import ItemStatusChanged
from studyledger.exceptions import (
    ConcurrentUpdateError,
    PersistenceError,
    ReferentialError,
    StudyLedgerError,
    TotalFailureError,
    ValidationError,
)

logger = structlog.get_logger(__name__)


class SubmitStudySessionUseCase:
    """
    Commit a batch of reviews.

    The batch is not atomic: every review is committed in its own
    transaction (progress update plus ledger entry), and a failing review
    does not prevent the others from being committed.
    """

    def __init__(
        self,
        catalog: ItemCatalogProtocol,
        progress_repository: ItemProgressRepositoryProtocol,
        review_ledger: ReviewLedgerProtocol,
        session_repository: StudySessionRepositoryProtocol,
        streak_tracker: StreakTracker,
        stats_service: LearnerStatsService,
        unit_of_work: UnitOfWork,
        max_reviews_per_batch: int,
        default_study_mode: str,
    ) -> None:
        """Initialize use case with dependencies."""
        self.catalog = catalog
        self.progress_repository = progress_repository
        self.review_ledger = review_ledger
        self.session_repository = session_repository
        self.streak_tracker = streak_tracker
        self.stats_service = stats_service
        self.unit_of_work = unit_of_work
        self.max_reviews_per_batch = max_reviews_per_batch
        self.default_study_mode = default_study_mode

    def submit(self, user_id: int, submission: StudySessionSubmission) -> StudySessionResult:
        """
        Commit every review of the batch that can be committed.

        Args:
            user_id: ID of the submitting user
            submission: Validated batch

        Returns:
            Result with the session summary, committed ledger entries,
            per-item failures and refreshed stats. A streak or stats failure
            after the reviews are committed is logged and left out of the result

        Raises:
            ValidationError: If the batch is too large or references an unknown deck
            PersistenceError: If the session summary cannot be stored
            TotalFailureError: If no review could be committed
        """
        user_id_vo = UserId(user_id)
        now = datetime.now(UTC)

        deck_id = self._validate_batch(submission)
        session = self._open_session(user_id_vo, submission, deck_id, now)

        committed: list[ReviewEvent] = []
        failures: list[ReviewFailure] = []
        for review in submission.reviews:
            outcome = self._commit_review_with_retry(user_id_vo, review, now)
            if outcome.is_success:
                committed.append(outcome.unwrap())
            else:
                failures.append(outcome.unwrap_error())

        if not committed:
            logger.warning(
                "study_session_total_failure",
                user_id=user_id,
                session_id=session.id.value,
                failed_reviews=len(failures),
            )
            raise TotalFailureError([(failure.item_id, failure.error) for failure in failures])

        # Reviews are committed from here on; nothing below may fail the batch
        streak_updated = self._touch_streak(user_id_vo, now)
        stats = self._summarize(user_id_vo)

        logger.info(
            "committed_study_session",
            user_id=user_id,
            session_id=session.id.value,
            review_entries=len(committed),
            failed_reviews=len(failures),
            streak_updated=streak_updated,
        )
        return StudySessionResult(
            session=session,
            stats=stats,
            committed=committed,
            failures=failures,
            streak_updated=streak_updated,
        )

    def _touch_streak(self, user_id: UserId, now: datetime) -> bool:
        try:
            self.streak_tracker.touch(user_id, now.date())
        except (StudyLedgerError, DomainError) as e:
            logger.error(
                "study_streak_not_updated",
                user_id=user_id.value,
                error_type=type(e).__name__,
                error=e.message,
            )
            return False
        return True

    def _summarize(self, user_id: UserId) -> LearnerStatsSummary | None:
        try:
            return self.stats_service.summary(user_id)
        except StudyLedgerError as e:
            logger.error(
                "learner_stats_unavailable",
                user_id=user_id.value,
                error_type=type(e).__name__,
                error=e.message,
            )
            return None

    def _validate_batch(self, submission: StudySessionSubmission) -> DeckId | None:
        if len(submission.reviews) > self.max_reviews_per_batch:
            raise ValidationError(
                f"A study session can contain at most {self.max_reviews_per_batch} reviews, "
                f"got {len(submission.reviews)}"
            )
        if submission.deck_id is None:
            return None

        deck_id = DeckId(submission.deck_id)
        if not self.catalog.deck_exists(deck_id):
            raise ValidationError(f"Deck with id {submission.deck_id} not found")
        return deck_id

    def _open_session(
        self,
        user_id: UserId,
        submission: StudySessionSubmission,
        deck_id: DeckId | None,
        now: datetime,
    ) -> StudySession:
        session = StudySession.close(
            user_id=user_id,
            submitted_at=now,
            total_time_ms=submission.total_time_ms,
            review_count=len(submission.reviews),
            correct_count=submission.correct_count,
            study_mode=submission.study_mode or self.default_study_mode,
            deck_id=deck_id,
        )
        with self.unit_of_work:
            session = self.session_repository.save(session)
            self.unit_of_work.commit()

        logger.debug("opened_study_session", user_id=user_id.value, session_id=session.id.value)
        return session

    def _commit_review_with_retry(
        self, user_id: UserId, review: ReviewSubmission, now: datetime
    ) -> Result[ReviewEvent, ReviewFailure]:
        outcome = self._commit_review(user_id, review, now)
        if outcome.is_failure and isinstance(outcome.unwrap_error().error, ConcurrentUpdateError):
            # The competing insert is committed now, so the retry updates it
            logger.info("retrying_contended_review", user_id=user_id.value, item_id=review.item_id)
            outcome = self._commit_review(user_id, review, now)
        return outcome

    def _commit_review(
        self, user_id: UserId, review: ReviewSubmission, now: datetime
    ) -> Result[ReviewEvent, ReviewFailure]:
        item_id = ItemId(review.item_id)
        reviewed_at = review.reviewed_at or now
        try:
            with self.unit_of_work:
                if not self.catalog.item_exists(item_id):
                    raise ReferentialError(review.item_id)

                update = self.progress_repository.upsert(
                    user_id, item_id, review.quality, reviewed_at
                )
                event = ReviewEvent.record(
                    user_id=user_id,
                    item_id=item_id,
                    review_date=reviewed_at,
                    quality=review.quality,
                    previous=update.previous,
                    updated=update.progress.schedule_state,
                    elapsed_ms=review.elapsed_ms,
                )
                event = self.review_ledger.append(event)
                self.unit_of_work.commit()
        except StudyLedgerError as e:
            logger.warning(
                "review_not_committed",
                user_id=user_id.value,
                item_id=review.item_id,
                error_type=type(e).__name__,
                error=e.message,
            )
            return Failure(ReviewFailure(item_id=review.item_id, error=e))
        except DomainError as e:
            logger.warning(
                "review_rejected_by_domain",
                user_id=user_id.value,
                item_id=review.item_id,
                error=e.message,
            )
            return Failure(
                ReviewFailure(item_id=review.item_id, error=PersistenceError(e.message))
            )

        for domain_event in update.events:
            if isinstance(domain_event, ItemStatusChanged):
                logger.info("item_status_changed", **domain_event.to_dict())
        self._log_schedule_mismatch(review, event)
        return Success(event)

    def _log_schedule_mismatch(self, review: ReviewSubmission, event: ReviewEvent) -> None:
        client = (
            review.previous_interval,
            review.new_interval,
            review.previous_ease_factor,
            review.new_ease_factor,
        )
        server = (
            event.previous_interval,
            event.new_interval,
            event.previous_ease_factor,
            event.new_ease_factor,
        )
        if any(c is not None and c != s for c, s in zip(client, server, strict=True)):
            logger.debug(
                "client_schedule_mismatch",
                item_id=review.item_id,
                client_schedule=client,
                server_schedule=server,
            )
