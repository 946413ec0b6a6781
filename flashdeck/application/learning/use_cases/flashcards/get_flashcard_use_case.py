"""Use case for fetching a single flashcard."""

from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.use_cases.exceptions import FlashcardNotFoundError
from flashdeck.domain.common.value_objects.ids import FlashcardId, UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard


class GetFlashcardUseCase:
    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        self.flashcard_repository = flashcard_repository

    def get_flashcard(self, flashcard_id: int, user_id: int) -> Flashcard:
        """
        Get a flashcard owned by the user.

        Raises:
            FlashcardNotFoundError: If the flashcard does not exist or belongs to someone else
        """
        flashcard = self.flashcard_repository.find_by_id(FlashcardId(flashcard_id), UserId(user_id))
        if not flashcard:
            raise FlashcardNotFoundError(flashcard_id)
        return flashcard
