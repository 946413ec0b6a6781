"""Tests for ReviewState value object."""

from datetime import UTC, datetime, timedelta

import pytest

from flashdeck.domain.common.exceptions import InvariantViolationError
from flashdeck.domain.learning.value_objects.review_state import ReviewState

NOW = datetime(2024, 1, 1, 12, tzinfo=UTC)


class TestReviewState:
    def test_initial_state(self) -> None:
        state = ReviewState.initial()

        assert state.interval_days == 0
        assert state.ease_factor == 2.5
        assert state.repetitions == 0
        assert state.due_at is None
        assert state.last_reviewed_at is None
        assert state.is_new

    @pytest.mark.parametrize("ease", [1.29, 2.51, 0.0])
    def test_ease_out_of_bounds(self, ease: float) -> None:
        with pytest.raises(InvariantViolationError):
            ReviewState(ease_factor=ease)

    def test_negative_interval(self) -> None:
        with pytest.raises(InvariantViolationError):
            ReviewState(interval_days=-1)

    def test_negative_repetitions(self) -> None:
        with pytest.raises(InvariantViolationError):
            ReviewState(repetitions=-1)

    def test_is_due_by(self) -> None:
        state = ReviewState(interval_days=1, due_at=NOW)

        assert state.is_due_by(NOW)
        assert state.is_due_by(NOW + timedelta(seconds=1))
        assert not state.is_due_by(NOW - timedelta(seconds=1))

    def test_new_card_is_never_due(self) -> None:
        assert not ReviewState.initial().is_due_by(NOW + timedelta(days=365))

    def test_equality_by_value(self) -> None:
        assert ReviewState(interval_days=3, due_at=NOW) == ReviewState(interval_days=3, due_at=NOW)

    def test_is_frozen(self) -> None:
        state = ReviewState.initial()
        with pytest.raises(AttributeError):
            state.interval_days = 5  # type: ignore[misc]
