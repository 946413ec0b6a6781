"""Repository for StudySession domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from flashdeck.domain.common.value_objects.ids import StudySessionId, UserId
from flashdeck.domain.learning.entities.study_session import StudySession
from flashdeck.infrastructure.learning.mappers.study_session_mapper import StudySessionMapper
from flashdeck.models import StudySession as StudySessionORM


class StudySessionRepository:
    """Repository for StudySession domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = StudySessionMapper()

    def find_by_id(self, session_id: StudySessionId, user_id: UserId) -> StudySession | None:
        """
        Find a session by ID with user ownership check.

        Returns:
            StudySession entity with its deck, or None if not found or not owned
        """
        stmt = (
            select(StudySessionORM)
            .options(selectinload(StudySessionORM.deck))
            .where(
                StudySessionORM.id == session_id.value,
                StudySessionORM.user_id == user_id.value,
            )
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, session: StudySession) -> StudySession:
        """
        Stage a session (create or update); new sessions get their deck rows too.

        Returns:
            StudySession entity with database-generated values
        """
        if session.id.is_transient:
            orm_model = self.mapper.to_orm(session)
            self.db.add(orm_model)
        else:
            existing = self.db.get(StudySessionORM, session.id.value)
            if not existing:
                raise ValueError(f"Study session {session.id.value} not found")
            orm_model = self.mapper.to_orm(session, existing)
        self.db.flush()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
