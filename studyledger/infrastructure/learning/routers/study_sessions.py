"""API routes for submitting study sessions."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from studyledger.application.learning.use_cases.dtos.learner_stats_dtos import (
    LearnerStatsSummary as StatsSummary,
)
from studyledger.application.learning.use_cases.dtos.study_session_dtos import (
    ReviewSubmission,
    StudySessionResult,
    StudySessionSubmission,
)
from studyledger.application.learning.use_cases.study_sessions.submit_study_session_use_case import (  # noqa: E501
    SubmitStudySessionUseCase,
)
from studyledger.core import container
from studyledger.domain.common.exceptions import DomainError
from studyledger.domain.identity.entities.user import User
from studyledger.exceptions import StudyLedgerError
from studyledger.infrastructure.common.di import inject_use_case
from studyledger.infrastructure.identity.dependencies import get_current_user
from studyledger.infrastructure.learning.schemas import (
    FailedReview,
    LearnerStatsSummary,
    StudySessionFailureResponse,
    StudySessionRequest,
    StudySessionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/study_sessions", tags=["study_sessions"])


def _to_submission(request: StudySessionRequest) -> StudySessionSubmission:
    """Build the validated batch; raises ValidationError on malformed input."""
    reviews = [
        ReviewSubmission(
            item_id=entry.item_id,
            quality=entry.quality,
            timestamp=entry.timestamp,
            elapsed_ms=entry.elapsed_ms,
            previous_interval=entry.previous_interval,
            new_interval=entry.new_interval,
            previous_ease_factor=entry.previous_ease_factor,
            new_ease_factor=entry.new_ease_factor,
        )
        for entry in request.review_history
    ]
    return StudySessionSubmission(
        reviews=reviews,
        total_time_ms=request.total_time,
        deck_id=request.deck_id,
        study_mode=request.study_mode,
    )


def _to_response(result: StudySessionResult) -> StudySessionResponse:
    failed_reviews = [
        FailedReview(item_id=failure.item_id, error_type=failure.error_type, error=failure.message)
        for failure in result.failures
    ]
    if failed_reviews:
        message = (
            f"Saved {result.review_entries} reviews, {len(failed_reviews)} could not be saved"
        )
    else:
        message = f"Saved {result.review_entries} reviews"
    return StudySessionResponse(
        success=True,
        message=message,
        session_id=result.session.id.value,
        review_entries=result.review_entries,
        failed_reviews=failed_reviews or None,
        stats=_to_stats(result.stats),
        streak_updated=result.streak_updated,
    )


def _to_stats(stats: StatsSummary | None) -> LearnerStatsSummary | None:
    if stats is None:
        return None
    return LearnerStatsSummary(
        total_items_studied=stats.total_items_studied,
        total_sessions=stats.total_sessions,
        average_accuracy=stats.average_accuracy,
    )


@router.post(
    "",
    response_model=StudySessionResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": StudySessionFailureResponse},
    },
)
def submit_study_session(
    request: StudySessionRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: SubmitStudySessionUseCase = Depends(
        inject_use_case(container.submit_study_session_use_case)
    ),
) -> StudySessionResponse:
    """
    Submit the reviews of a finished study session.

    Every review is committed independently. Reviews that fail are listed in
    `failedReviews`; the request only fails as a whole when the batch is
    malformed or when no review at all could be committed.

    Args:
        request: Reviews, total time and optional deck/study mode
        current_user: Caller resolved from the identity header
        use_case: SubmitStudySessionUseCase injected via dependency container

    Returns:
        Session summary, number of committed reviews, failed reviews and stats

    Raises:
        ValidationError: If the batch is malformed (400)
        PersistenceError: If the session could not be stored (503)
        TotalFailureError: If no review could be committed (500)
    """
    try:
        submission = _to_submission(request)
        result = use_case.submit(current_user.id.value, submission)
        return _to_response(result)
    except (StudyLedgerError, DomainError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to submit study session for user {current_user.id.value}: {e!s}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
