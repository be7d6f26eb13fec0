"""User entity for the caller identity supplied upstream."""

from dataclasses import dataclass
from datetime import datetime

from studyledger.domain.common.entity import Entity
from studyledger.domain.common.exceptions import ValidationError
from studyledger.domain.common.value_objects.ids import UserId

# Domain constraints
MAX_EMAIL_LENGTH = 100


@dataclass
class User(Entity[UserId]):
    """
    User entity representing an already-authenticated learner.

    Identity is owned by an upstream collaborator; this service only
    reads users to scope progress, ledger and streak data.
    """

    id: UserId
    email: str
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.email:
            raise ValidationError("Email cannot be empty", field="email", value=self.email)
        if len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters", field="email", value=self.email
            )

    @classmethod
    def create_with_id(cls, id: UserId, email: str, created_at: datetime | None) -> "User":
        """Reconstitute a user from persistence."""
        return cls(id=id, email=email, created_at=created_at)
