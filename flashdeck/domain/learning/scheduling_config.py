"""Tunable parameters of the scheduling core."""

from dataclasses import dataclass
from datetime import tzinfo

from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.learning.value_objects.review_state import (
    INITIAL_EASE_FACTOR,
    MAX_EASE_FACTOR,
    MIN_EASE_FACTOR,
)


@dataclass(frozen=True)
class SchedulingConfig:
    """
    Explicit configuration for SessionBuilder and ReviewScheduler.

    Built once from application settings and passed in; the scheduling
    services never read global state.

    Attributes:
        max_total: Upper bound on cards in one session
        max_new: Upper bound on never-reviewed cards in one session
        ease_min: Floor for the ease factor
        ease_max: Ceiling for the ease factor
        initial_ease: Ease factor given to new cards
        hard_ease_penalty: Ease subtracted on a hard rating
        easy_ease_bonus: Ease added on an easy rating
        normal_interval_multiplier: Interval growth on a normal rating
        normal_due_days: Days until a normally rated card is due again
        easy_min_due_days: Minimum days until an easily rated card is due again
        first_success_interval_days: Interval given on the first easy rating
        timezone: Zone whose midnight defines "today"; None means server-local
    """

    max_total: int = 30
    max_new: int = 10
    ease_min: float = MIN_EASE_FACTOR
    ease_max: float = MAX_EASE_FACTOR
    initial_ease: float = INITIAL_EASE_FACTOR
    hard_ease_penalty: float = 0.2
    easy_ease_bonus: float = 0.1
    normal_interval_multiplier: float = 1.2
    normal_due_days: int = 2
    easy_min_due_days: int = 4
    first_success_interval_days: int = 1
    timezone: tzinfo | None = None

    def __post_init__(self) -> None:
        if self.max_total <= 0:
            raise ValidationError("max_total must be positive", field="max_total")
        if self.max_new <= 0:
            raise ValidationError("max_new must be positive", field="max_new")
        if self.max_new > self.max_total:
            raise ValidationError("max_new cannot exceed max_total", field="max_new")
        if not MIN_EASE_FACTOR <= self.ease_min <= self.ease_max <= MAX_EASE_FACTOR:
            raise ValidationError(
                f"Ease bounds must satisfy {MIN_EASE_FACTOR} <= ease_min <= ease_max "
                f"<= {MAX_EASE_FACTOR}",
                field="ease_min",
            )
        if not self.ease_min <= self.initial_ease <= self.ease_max:
            raise ValidationError("initial_ease must lie within ease bounds", field="initial_ease")
        if self.first_success_interval_days < 1:
            raise ValidationError(
                "first_success_interval_days must be at least 1",
                field="first_success_interval_days",
            )
