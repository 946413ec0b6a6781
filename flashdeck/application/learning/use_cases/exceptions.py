"""Exceptions for learning use cases."""

from flashdeck.exceptions import NotFoundError


class FlashcardNotFoundError(NotFoundError):
    """Flashcard not found error."""

    def __init__(self, flashcard_id: int) -> None:
        self.flashcard_id = flashcard_id
        super().__init__(f"Flashcard with id {flashcard_id} not found")


class StudySessionNotFoundError(NotFoundError):
    """Study session not found error."""

    def __init__(self, session_id: int) -> None:
        self.session_id = session_id
        super().__init__(f"Study session with id {session_id} not found")
