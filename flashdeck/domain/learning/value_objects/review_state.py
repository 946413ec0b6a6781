"""
ReviewState value object.

The scheduling half of a flashcard: everything the review scheduler reads
and rewrites. A card with no due date has never been reviewed.
"""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.domain.common.exceptions import InvariantViolationError
from flashdeck.domain.common.value_object import ValueObject

MIN_EASE_FACTOR = 1.3
MAX_EASE_FACTOR = 2.5
INITIAL_EASE_FACTOR = 2.5


@dataclass(frozen=True, eq=False)
class ReviewState(ValueObject):
    """Spacing state of one flashcard."""

    interval_days: int = 0
    ease_factor: float = INITIAL_EASE_FACTOR
    repetitions: int = 0
    due_at: datetime | None = None
    last_reviewed_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.interval_days < 0:
            raise InvariantViolationError("ReviewState", "interval_days must be >= 0")
        if self.repetitions < 0:
            raise InvariantViolationError("ReviewState", "repetitions must be >= 0")
        if not MIN_EASE_FACTOR <= self.ease_factor <= MAX_EASE_FACTOR:
            raise InvariantViolationError(
                "ReviewState",
                f"ease_factor must be within [{MIN_EASE_FACTOR}, {MAX_EASE_FACTOR}], "
                f"got {self.ease_factor}",
            )

    @classmethod
    def initial(cls) -> "ReviewState":
        """State of a freshly created, never reviewed card."""
        return cls()

    @property
    def is_new(self) -> bool:
        return self.due_at is None

    def is_due_by(self, cutoff: datetime) -> bool:
        """True if the card has been reviewed before and is due at or before cutoff."""
        return self.due_at is not None and self.due_at <= cutoff
