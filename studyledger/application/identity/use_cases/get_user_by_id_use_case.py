"""Use case for resolving the caller forwarded by the upstream gateway."""

from studyledger.application.identity.protocols.user_repository import UserRepositoryProtocol
from studyledger.domain.common.value_objects.ids import UserId
from studyledger.domain.identity.entities.user import User
from studyledger.domain.identity.exceptions import UserNotFoundError


class GetUserByIdUseCase:
    """Use case for getting a user by ID (used internally by dependency injection)."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository

    def get_user(self, user_id: int) -> User:
        """
        Get a user by ID.

        Args:
            user_id: User's ID

        Returns:
            User entity

        Raises:
            UserNotFoundError: If user is not found
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)
        return user
