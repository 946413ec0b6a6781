"""Tests for Rating value object."""

import pytest

from flashdeck.domain.learning.exceptions import InvalidRatingError
from flashdeck.domain.learning.value_objects.rating import Rating


class TestRating:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(-1, Rating.HARD), (0, Rating.NORMAL), (1, Rating.EASY)],
    )
    def test_from_value(self, raw: int, expected: Rating) -> None:
        assert Rating.from_value(raw) is expected

    @pytest.mark.parametrize("raw", [2, -2, 10, True, False, "1", 1.0, None])
    def test_rejects_anything_else(self, raw: object) -> None:
        with pytest.raises(InvalidRatingError) as exc_info:
            Rating.from_value(raw)

        assert exc_info.value.field == "rating"
        assert exc_info.value.message == "Rating must be -1, 0, or 1"

    def test_int_values(self) -> None:
        assert [int(r) for r in Rating] == [-1, 0, 1]
