from typing import Protocol

from studyledger.domain.common.value_objects.ids import UserId
from studyledger.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    def find_by_id(self, user_id: UserId) -> User | None: ...
