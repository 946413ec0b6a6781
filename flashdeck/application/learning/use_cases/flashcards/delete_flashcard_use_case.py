"""Use case for deleting flashcards."""

import structlog

from flashdeck.application.common.unit_of_work import UnitOfWork
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.use_cases.exceptions import FlashcardNotFoundError
from flashdeck.domain.common.value_objects.ids import FlashcardId, UserId

logger = structlog.get_logger(__name__)


class DeleteFlashcardUseCase:
    """Use case for deleting flashcards."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.unit_of_work = unit_of_work

    def delete_flashcard(self, flashcard_id: int, user_id: int) -> None:
        """
        Delete a flashcard together with its review records.

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        with self.unit_of_work:
            deleted = self.flashcard_repository.delete(FlashcardId(flashcard_id), UserId(user_id))
            if not deleted:
                raise FlashcardNotFoundError(flashcard_id)
            self.unit_of_work.commit()

        logger.info("deleted_flashcard", flashcard_id=flashcard_id)
