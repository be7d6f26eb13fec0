"""Mapper for User ORM ↔ Domain conversion."""

from studyledger.domain.common.value_objects.ids import UserId
from studyledger.domain.identity.entities.user import User
from studyledger.infrastructure.common.storage import as_utc
from studyledger.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.create_with_id(
            id=UserId(orm_model.id),
            email=orm_model.email,
            created_at=as_utc(orm_model.created_at) if orm_model.created_at else None,
        )
