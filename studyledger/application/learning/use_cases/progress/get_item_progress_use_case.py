"""Use case for listing the progress records of a learner."""

from datetime import UTC, datetime

from studyledger.application.common.pagination import PaginatedResult, Pagination
from studyledger.application.learning.protocols.item_progress_repository import (
    ItemProgressRepositoryProtocol,
)
from studyledger.domain.common.value_objects.ids import UserId
from studyledger.domain.learning.entities.item_progress import ItemProgress
from studyledger.exceptions import ValidationError


class GetItemProgressUseCase:
    """Use case for listing the progress records of a learner."""

    def __init__(self, progress_repository: ItemProgressRepositoryProtocol) -> None:
        self.progress_repository = progress_repository

    def list_progress(self, user_id: int, limit: int, offset: int) -> PaginatedResult[ItemProgress]:
        """
        List progress records, most recently reviewed first.

        Raises:
            ValidationError: If limit or offset are out of range
        """
        pagination = self._pagination(limit, offset)
        user_id_vo = UserId(user_id)
        records = self.progress_repository.find_by_user(
            user_id_vo, pagination.limit, pagination.offset
        )
        total = self.progress_repository.count_by_user(user_id_vo)
        return PaginatedResult(items=records, total=total, pagination=pagination)

    def list_due(self, user_id: int, limit: int) -> list[ItemProgress]:
        """
        List records due now, earliest due date first.

        Raises:
            ValidationError: If limit is out of range
        """
        pagination = self._pagination(limit, 0)
        return self.progress_repository.find_due(
            UserId(user_id), datetime.now(UTC), pagination.limit
        )

    @staticmethod
    def _pagination(limit: int, offset: int) -> Pagination:
        try:
            return Pagination(limit=limit, offset=offset)
        except ValueError as e:
            raise ValidationError(str(e)) from e
