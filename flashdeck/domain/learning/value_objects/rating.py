"""Recall rating given by the user after revealing a card."""

from enum import IntEnum

from flashdeck.domain.learning.exceptions import InvalidRatingError


class Rating(IntEnum):
    """Self-assessed recall quality."""

    HARD = -1
    NORMAL = 0
    EASY = 1

    @classmethod
    def from_value(cls, value: object) -> "Rating":
        """
        Parse a raw rating.

        Raises:
            InvalidRatingError: If value is not exactly -1, 0 or 1
        """
        # bool is an int subclass; True must not read as EASY
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidRatingError(value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidRatingError(value) from None
