"""
SessionItem entity - the immutable record of one rating.
"""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.value_objects import (
    FlashcardId,
    SessionItemId,
    StudySessionId,
)
from flashdeck.domain.learning.value_objects.rating import Rating


@dataclass(frozen=True, eq=False)
class SessionItem(Entity[SessionItemId]):
    """
    One rating event inside a study session.

    Items are append-only. Rating the same card twice in a session produces
    two items.
    """

    id: SessionItemId
    session_id: StudySessionId
    flashcard_id: FlashcardId
    rating: Rating
    created_at: datetime | None = None

    @classmethod
    def record(
        cls,
        session_id: StudySessionId,
        flashcard_id: FlashcardId,
        rating: Rating,
        created_at: datetime,
    ) -> "SessionItem":
        """Create a new item (ID will be 0 until persisted)."""
        return cls(
            id=SessionItemId.generate(),
            session_id=session_id,
            flashcard_id=flashcard_id,
            rating=rating,
            created_at=created_at,
        )

    @classmethod
    def create_with_id(
        cls,
        id: SessionItemId,
        session_id: StudySessionId,
        flashcard_id: FlashcardId,
        rating: Rating,
        created_at: datetime | None = None,
    ) -> "SessionItem":
        """Reconstitute an item from persistence."""
        return cls(
            id=id,
            session_id=session_id,
            flashcard_id=flashcard_id,
            rating=rating,
            created_at=created_at,
        )
