"""Mapper for Flashcard ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects import FlashcardId, UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.value_objects.review_state import ReviewState
from flashdeck.infrastructure.common.timestamps import ensure_utc
from flashdeck.models import Flashcard as FlashcardORM


class FlashcardMapper:
    """Mapper for Flashcard ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: FlashcardORM) -> Flashcard:
        """Convert ORM model to domain entity."""
        return Flashcard.create_with_id(
            id=FlashcardId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            front=orm_model.front,
            back=orm_model.back,
            source=orm_model.source,
            review_state=ReviewState(
                interval_days=orm_model.interval_days,
                ease_factor=orm_model.ease_factor,
                repetitions=orm_model.repetitions,
                due_at=ensure_utc(orm_model.due_at),
                last_reviewed_at=ensure_utc(orm_model.last_reviewed_at),
            ),
            created_at=ensure_utc(orm_model.created_at),
            updated_at=ensure_utc(orm_model.updated_at),
        )

    def to_orm(
        self, domain_entity: Flashcard, orm_model: FlashcardORM | None = None
    ) -> FlashcardORM:
        """Convert domain entity to ORM model."""
        state = domain_entity.review_state
        if orm_model:
            orm_model.user_id = domain_entity.user_id.value
            orm_model.front = domain_entity.front
            orm_model.back = domain_entity.back
            orm_model.source = domain_entity.source
            orm_model.interval_days = state.interval_days
            orm_model.ease_factor = state.ease_factor
            orm_model.repetitions = state.repetitions
            orm_model.due_at = state.due_at
            orm_model.last_reviewed_at = state.last_reviewed_at
            return orm_model

        return FlashcardORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            user_id=domain_entity.user_id.value,
            front=domain_entity.front,
            back=domain_entity.back,
            source=domain_entity.source,
            interval_days=state.interval_days,
            ease_factor=state.ease_factor,
            repetitions=state.repetitions,
            due_at=state.due_at,
            last_reviewed_at=state.last_reviewed_at,
        )
