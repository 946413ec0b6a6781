"""
Flashcard aggregate root for spaced repetition learning.
"""

from dataclasses import dataclass, field
from datetime import datetime

from flashdeck.domain.common.aggregate_root import AggregateRoot
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.common.value_objects import FlashcardId, UserId
from flashdeck.domain.learning.events import FlashcardReviewed
from flashdeck.domain.learning.value_objects.rating import Rating
from flashdeck.domain.learning.value_objects.review_state import ReviewState

MAX_SIDE_LENGTH = 2000
MAX_SOURCE_LENGTH = 500
DEFAULT_SOURCE = "manual"


def _clean_side(value: str, name: str) -> str:
    if not value or not value.strip():
        raise DomainError(f"{name} cannot be empty")
    value = value.strip()
    if len(value) > MAX_SIDE_LENGTH:
        raise DomainError(f"{name} cannot exceed {MAX_SIDE_LENGTH} characters")
    return value


@dataclass(eq=False)
class Flashcard(AggregateRoot[FlashcardId]):
    """
    Flashcard with front/back content and its review schedule.

    Business Rules:
    - Front and back cannot be empty
    - Content edits never touch the review state
    - The review state changes only through apply_review
    """

    id: FlashcardId
    user_id: UserId
    front: str
    back: str
    source: str | None = DEFAULT_SOURCE
    review_state: ReviewState = field(default_factory=ReviewState.initial)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _clean_side(self.front, "Front")
        _clean_side(self.back, "Back")
        if self.source is not None and len(self.source) > MAX_SOURCE_LENGTH:
            raise DomainError(f"Source cannot exceed {MAX_SOURCE_LENGTH} characters")

    @property
    def is_new(self) -> bool:
        """True if the card has never been reviewed."""
        return self.review_state.is_new

    @property
    def due_at(self) -> datetime | None:
        return self.review_state.due_at

    def update_front(self, front: str) -> None:
        """
        Update the front (prompt) side.

        Raises:
            DomainError: If front is empty or too long
        """
        self.front = _clean_side(front, "Front")

    def update_back(self, back: str) -> None:
        """
        Update the back (answer) side.

        Raises:
            DomainError: If back is empty or too long
        """
        self.back = _clean_side(back, "Back")

    def update_source(self, source: str | None) -> None:
        if source is not None and len(source) > MAX_SOURCE_LENGTH:
            raise DomainError(f"Source cannot exceed {MAX_SOURCE_LENGTH} characters")
        self.source = source.strip() if source else None

    def apply_review(self, rating: Rating, next_state: ReviewState) -> None:
        """
        Replace the review state with the one computed for a rating.

        Args:
            rating: The rating that produced next_state
            next_state: Output of ReviewScheduler.next_state

        Raises:
            DomainError: If next_state carries no due date or review time
        """
        if next_state.due_at is None or next_state.last_reviewed_at is None:
            raise DomainError("A reviewed card must have a due date and a review time")

        self.review_state = next_state
        self._record_event(
            FlashcardReviewed(
                flashcard_id=self.id,
                user_id=self.user_id,
                rating=int(rating),
                interval_days=next_state.interval_days,
                ease_factor=next_state.ease_factor,
                due_at=next_state.due_at,
            )
        )

    @classmethod
    def create(
        cls,
        user_id: UserId,
        front: str,
        back: str,
        source: str | None = DEFAULT_SOURCE,
        initial_state: ReviewState | None = None,
    ) -> "Flashcard":
        """Create a new, never reviewed flashcard (ID will be 0 until persisted)."""
        return cls(
            id=FlashcardId.generate(),
            user_id=user_id,
            front=_clean_side(front, "Front"),
            back=_clean_side(back, "Back"),
            source=(source or "").strip() or DEFAULT_SOURCE,
            review_state=initial_state or ReviewState.initial(),
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        user_id: UserId,
        front: str,
        back: str,
        source: str | None,
        review_state: ReviewState,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            front=front,
            back=back,
            source=source,
            review_state=review_state,
            created_at=created_at,
            updated_at=updated_at,
        )
