"""Domain service computing a flashcard's next review state from a rating."""

from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.scheduling_config import SchedulingConfig
from flashdeck.domain.learning.value_objects.rating import Rating
from flashdeck.domain.learning.value_objects.review_state import ReviewState

# Ease factors are kept to two decimals so repeated +0.1/-0.2 steps don't drift.
EASE_PRECISION = Decimal("0.01")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3)."""
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _round_ease(value: float) -> float:
    return float(Decimal(str(value)).quantize(EASE_PRECISION, rounding=ROUND_HALF_UP))


class ReviewScheduler:
    """
    Simplified SM-2 scheduler.

    rating  interval                     ease             reps  due
    hard    0                            max(min, e-0.2)  0     now
    normal  max(1, round(i * 1.2))       unchanged        same  now + 2 days
    easy    1 if i == 0 else round(i*e)  min(max, e+0.1)  +1    now + max(4, i') days

    The service is stateless and deterministic: the same state, rating and
    instant always give the same result.
    """

    def __init__(self, config: SchedulingConfig | None = None) -> None:
        self.config = config or SchedulingConfig()

    def next_state(self, state: ReviewState, rating: Rating, now: datetime) -> ReviewState:
        """
        Compute the state that follows a rating.

        Args:
            state: Current review state of the card
            rating: The user's recall rating
            now: Instant of the rating (timezone-aware)

        Returns:
            New ReviewState; last_reviewed_at is always now
        """
        rating = Rating.from_value(rating)
        config = self.config

        if rating is Rating.HARD:
            return ReviewState(
                interval_days=0,
                ease_factor=self._clamp_ease(state.ease_factor - config.hard_ease_penalty),
                repetitions=0,
                due_at=now,
                last_reviewed_at=now,
            )

        if rating is Rating.NORMAL:
            grown = round_half_up(state.interval_days * config.normal_interval_multiplier)
            interval = max(1, grown)
            return ReviewState(
                interval_days=interval,
                ease_factor=state.ease_factor,
                repetitions=state.repetitions,
                due_at=now + timedelta(days=config.normal_due_days),
                last_reviewed_at=now,
            )

        if state.interval_days == 0:
            interval = config.first_success_interval_days
        else:
            interval = round_half_up(state.interval_days * state.ease_factor)
        return ReviewState(
            interval_days=interval,
            ease_factor=self._clamp_ease(state.ease_factor + config.easy_ease_bonus),
            repetitions=state.repetitions + 1,
            due_at=now + timedelta(days=max(config.easy_min_due_days, interval)),
            last_reviewed_at=now,
        )

    def review(self, flashcard: Flashcard, rating: Rating, now: datetime) -> ReviewState:
        """
        Apply a rating to a flashcard in place.

        Returns:
            The state now held by the flashcard
        """
        next_state = self.next_state(flashcard.review_state, rating, now)
        flashcard.apply_review(rating, next_state)
        return next_state

    def _clamp_ease(self, value: float) -> float:
        return min(self.config.ease_max, max(self.config.ease_min, _round_ease(value)))
