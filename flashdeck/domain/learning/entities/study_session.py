"""
StudySession aggregate root.
"""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.domain.common.aggregate_root import AggregateRoot
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.common.value_objects import FlashcardId, StudySessionId, UserId
from flashdeck.domain.learning.events import StudySessionEnded, StudySessionStarted


@dataclass(eq=False)
class StudySession(AggregateRoot[StudySessionId]):
    """
    One bounded sitting of flashcard review.

    Business Rules:
    - The deck (ordered flashcard ids) is fixed when the session is created
    - A deck is never empty and never lists a card twice
    - ended_at, once set, is not before started_at
    """

    id: StudySessionId
    user_id: UserId
    started_at: datetime
    flashcard_ids: tuple[FlashcardId, ...]
    ended_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.flashcard_ids = tuple(self.flashcard_ids)
        if not self.flashcard_ids:
            raise DomainError("A study session needs at least one flashcard")
        if len(set(self.flashcard_ids)) != len(self.flashcard_ids):
            raise DomainError("A study session cannot contain the same flashcard twice")
        if self.ended_at is not None and self.ended_at < self.started_at:
            raise DomainError("End time must be after start time")

    @property
    def is_active(self) -> bool:
        return self.ended_at is None

    @property
    def card_count(self) -> int:
        return len(self.flashcard_ids)

    def contains(self, flashcard_id: FlashcardId) -> bool:
        return flashcard_id in self.flashcard_ids

    def end(self, ended_at: datetime) -> None:
        """
        Mark the session as closed.

        Ending an already ended session moves its end time.

        Raises:
            DomainError: If ended_at precedes started_at
        """
        if ended_at < self.started_at:
            raise DomainError("End time must be after start time")
        self.ended_at = ended_at
        self._record_event(
            StudySessionEnded(session_id=self.id, user_id=self.user_id, ended_at=ended_at)
        )

    @classmethod
    def start(
        cls,
        user_id: UserId,
        flashcard_ids: list[FlashcardId],
        started_at: datetime,
    ) -> "StudySession":
        """
        Factory method for a new session over an already selected deck.

        Args:
            user_id: Owner of the session
            flashcard_ids: Deck in presentation order
            started_at: Session start time

        Returns:
            New StudySession instance
        """
        session = cls(
            id=StudySessionId.generate(),
            user_id=user_id,
            started_at=started_at,
            flashcard_ids=tuple(flashcard_ids),
        )
        session._record_event(StudySessionStarted(user_id=user_id, card_count=session.card_count))
        return session

    @classmethod
    def create_with_id(
        cls,
        id: StudySessionId,
        user_id: UserId,
        started_at: datetime,
        flashcard_ids: tuple[FlashcardId, ...],
        ended_at: datetime | None = None,
    ) -> "StudySession":
        """Reconstitute a session from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            started_at=started_at,
            flashcard_ids=flashcard_ids,
            ended_at=ended_at,
        )
