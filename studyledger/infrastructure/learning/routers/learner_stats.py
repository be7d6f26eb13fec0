"""API routes for the statistics and progress of the current user."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from studyledger.application.learning.use_cases.progress.get_item_progress_use_case import (
    GetItemProgressUseCase,
)
from studyledger.application.learning.use_cases.statistics.get_learner_stats_use_case import (
    GetLearnerStatsUseCase,
)
from studyledger.application.learning.use_cases.statistics.get_review_history_use_case import (
    GetReviewHistoryUseCase,
)
from studyledger.core import container
from studyledger.domain.common.exceptions import DomainError
from studyledger.domain.identity.entities.user import User
from studyledger.domain.learning.entities.item_progress import ItemProgress as ItemProgressEntity
from studyledger.exceptions import StudyLedgerError
from studyledger.infrastructure.common.di import inject_use_case
from studyledger.infrastructure.common.schemas import PaginatedResponse
from studyledger.infrastructure.identity.dependencies import get_current_user
from studyledger.infrastructure.learning.schemas import (
    DailyReviewCount,
    DueItemsResponse,
    ItemProgress,
    LearnerStatsResponse,
    ReviewHistoryResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users/me", tags=["statistics"])


def _to_schema(progress: ItemProgressEntity) -> ItemProgress:
    return ItemProgress(
        item_id=progress.item_id.value,
        status=progress.status.value,
        interval=progress.interval,
        ease_factor=progress.ease_factor,
        due_date=progress.due_date,
        review_count=progress.review_count,
        correct_count=progress.correct_count,
        incorrect_count=progress.incorrect_count,
        last_review_date=progress.last_review_date,
        last_review_quality=progress.last_review_quality,
    )


def _unexpected(action: str, user_id: int, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action} for user {user_id}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.get("/stats", response_model=LearnerStatsResponse, status_code=status.HTTP_200_OK)
def get_learner_stats(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: GetLearnerStatsUseCase = Depends(inject_use_case(container.get_learner_stats_use_case)),
) -> LearnerStatsResponse:
    """
    Get the statistics of the current user.

    Returns:
        Item, session and review totals, accuracy, mastered items and streak
    """
    try:
        stats = use_case.get_stats(current_user.id.value)
        return LearnerStatsResponse(
            total_items_studied=stats.total_items_studied,
            total_sessions=stats.total_sessions,
            average_accuracy=stats.average_accuracy,
            total_reviews=stats.total_reviews,
            correct_reviews=stats.correct_reviews,
            session_accuracy=stats.session_accuracy,
            mastered_items=stats.mastered_items,
            streak=stats.streak,
            last_study_date=stats.last_study_date,
        )
    except (StudyLedgerError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("get stats", current_user.id.value, e) from e


@router.get(
    "/review_history", response_model=ReviewHistoryResponse, status_code=status.HTTP_200_OK
)
def get_review_history(
    current_user: Annotated[User, Depends(get_current_user)],
    days: Annotated[int | None, Query(description="Number of days, today included")] = None,
    use_case: GetReviewHistoryUseCase = Depends(
        inject_use_case(container.get_review_history_use_case)
    ),
) -> ReviewHistoryResponse:
    """
    Get the number of reviews per UTC day, oldest first.

    Days without reviews are included with a count of 0.
    """
    try:
        history = use_case.get_history(current_user.id.value, days)
        return ReviewHistoryResponse(
            days=len(history),
            history=[DailyReviewCount(date=entry.date, count=entry.count) for entry in history],
        )
    except (StudyLedgerError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("get review history", current_user.id.value, e) from e


@router.get(
    "/progress",
    response_model=PaginatedResponse[ItemProgress],
    status_code=status.HTTP_200_OK,
)
def list_progress(
    current_user: Annotated[User, Depends(get_current_user)],
    limit: int = 100,
    offset: int = 0,
    use_case: GetItemProgressUseCase = Depends(
        inject_use_case(container.get_item_progress_use_case)
    ),
) -> PaginatedResponse[ItemProgress]:
    """
    List the progress records of the current user, most recently reviewed first.
    """
    try:
        page = use_case.list_progress(current_user.id.value, limit=limit, offset=offset)
        return PaginatedResponse[ItemProgress](
            items=[_to_schema(progress) for progress in page.items],
            total=page.total,
            offset=page.pagination.offset,
            limit=page.pagination.limit,
        )
    except (StudyLedgerError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("list progress", current_user.id.value, e) from e


@router.get("/progress/due", response_model=DueItemsResponse, status_code=status.HTTP_200_OK)
def list_due_items(
    current_user: Annotated[User, Depends(get_current_user)],
    limit: int = 100,
    use_case: GetItemProgressUseCase = Depends(
        inject_use_case(container.get_item_progress_use_case)
    ),
) -> DueItemsResponse:
    """List the items of the current user that are due now, earliest first."""
    try:
        due = use_case.list_due(current_user.id.value, limit=limit)
        return DueItemsResponse(items=[_to_schema(progress) for progress in due], count=len(due))
    except (StudyLedgerError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("list due items", current_user.id.value, e) from e
