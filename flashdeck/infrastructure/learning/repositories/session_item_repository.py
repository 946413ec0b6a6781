"""Repository for SessionItem domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects.ids import StudySessionId
from flashdeck.domain.learning.entities.session_item import SessionItem
from flashdeck.infrastructure.learning.mappers.study_session_mapper import SessionItemMapper
from flashdeck.models import SessionItem as SessionItemORM


class SessionItemRepository:
    """Append-only store of ratings."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = SessionItemMapper()

    def add(self, item: SessionItem) -> SessionItem:
        """Stage a new session item and return it with its generated ID."""
        orm_model = self.mapper.to_orm(item)
        self.db.add(orm_model)
        self.db.flush()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def find_by_session(self, session_id: StudySessionId) -> list[SessionItem]:
        stmt = (
            select(SessionItemORM)
            .where(SessionItemORM.session_id == session_id.value)
            .order_by(SessionItemORM.id.asc())
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]
