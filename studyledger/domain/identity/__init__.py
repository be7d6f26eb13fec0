"""Identity domain layer."""

from studyledger.domain.identity.entities.user import User
from studyledger.domain.identity.exceptions import UserNotFoundError

__all__ = [
    "User",
    "UserNotFoundError",
]
