"""Mapper for User ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entities.user import User
from flashdeck.infrastructure.common.timestamps import ensure_utc
from flashdeck.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.create_with_id(
            id=UserId(orm_model.id),
            email=orm_model.email,
            created_at=ensure_utc(orm_model.created_at),
        )
