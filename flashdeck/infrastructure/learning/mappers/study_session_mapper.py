"""Mappers for StudySession and SessionItem ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects import (
    FlashcardId,
    SessionItemId,
    StudySessionId,
    UserId,
)
from flashdeck.domain.learning.entities.session_item import SessionItem
from flashdeck.domain.learning.entities.study_session import StudySession
from flashdeck.domain.learning.value_objects.rating import Rating
from flashdeck.infrastructure.common.timestamps import ensure_utc
from flashdeck.models import SessionItem as SessionItemORM
from flashdeck.models import StudySession as StudySessionORM
from flashdeck.models import StudySessionFlashcard as StudySessionFlashcardORM


class StudySessionMapper:
    """Mapper for StudySession ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: StudySessionORM) -> StudySession:
        """Convert ORM model (with its deck rows) to domain entity."""
        return StudySession.create_with_id(
            id=StudySessionId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            started_at=ensure_utc(orm_model.started_at),
            flashcard_ids=tuple(FlashcardId(row.flashcard_id) for row in orm_model.deck),
            ended_at=ensure_utc(orm_model.ended_at),
        )

    def to_orm(
        self, domain_entity: StudySession, orm_model: StudySessionORM | None = None
    ) -> StudySessionORM:
        """
        Convert domain entity to ORM model.

        The deck is written only for new sessions; it never changes afterwards.
        """
        if orm_model:
            orm_model.ended_at = domain_entity.ended_at
            return orm_model

        return StudySessionORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            user_id=domain_entity.user_id.value,
            started_at=domain_entity.started_at,
            ended_at=domain_entity.ended_at,
            deck=[
                StudySessionFlashcardORM(flashcard_id=flashcard_id.value, position=position)
                for position, flashcard_id in enumerate(domain_entity.flashcard_ids)
            ],
        )


class SessionItemMapper:
    """Mapper for SessionItem ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: SessionItemORM) -> SessionItem:
        return SessionItem.create_with_id(
            id=SessionItemId(orm_model.id),
            session_id=StudySessionId(orm_model.session_id),
            flashcard_id=FlashcardId(orm_model.flashcard_id),
            rating=Rating(orm_model.rating),
            created_at=ensure_utc(orm_model.created_at),
        )

    def to_orm(self, domain_entity: SessionItem) -> SessionItemORM:
        return SessionItemORM(
            session_id=domain_entity.session_id.value,
            flashcard_id=domain_entity.flashcard_id.value,
            rating=int(domain_entity.rating),
            created_at=domain_entity.created_at,
        )
