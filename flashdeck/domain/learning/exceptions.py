"""Learning domain exceptions."""

from flashdeck.domain.common.exceptions import BusinessRuleViolationError, ValidationError


class NoCardsAvailableError(BusinessRuleViolationError):
    """Raised when a study session is requested but no card is due or new."""

    def __init__(self) -> None:
        super().__init__(
            "no_cards_available",
            "No flashcards available for study",
        )


class InvalidRatingError(ValidationError):
    """Raised when a rating is not one of -1 (hard), 0 (normal), 1 (easy)."""

    def __init__(self, value: object) -> None:
        super().__init__("Rating must be -1, 0, or 1", field="rating", value=value)
