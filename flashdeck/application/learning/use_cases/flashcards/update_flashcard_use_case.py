"""Use case for updating flashcard content."""

import structlog

from flashdeck.application.common.unit_of_work import UnitOfWork
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.use_cases.exceptions import FlashcardNotFoundError
from flashdeck.domain.common.value_objects.ids import FlashcardId, UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class UpdateFlashcardUseCase:
    """Use case for updating flashcard content."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.unit_of_work = unit_of_work

    def update_flashcard(
        self,
        flashcard_id: int,
        user_id: int,
        front: str | None = None,
        back: str | None = None,
        source: str | None = None,
    ) -> Flashcard:
        """
        Update a flashcard's front, back and/or source.

        The review state is left untouched.

        Args:
            flashcard_id: ID of the flashcard to update
            user_id: ID of the user
            front: New front text (optional)
            back: New back text (optional)
            source: New source (optional)

        Returns:
            Updated flashcard domain entity

        Raises:
            FlashcardNotFoundError: If flashcard is not found
            ValidationError: If no field is provided
        """
        if front is None and back is None and source is None:
            raise ValidationError(
                "At least one field (front, back or source) must be provided", status_code=400
            )

        with self.unit_of_work:
            flashcard = self.flashcard_repository.find_by_id(
                FlashcardId(flashcard_id), UserId(user_id)
            )
            if not flashcard:
                raise FlashcardNotFoundError(flashcard_id)

            if front is not None:
                flashcard.update_front(front)
            if back is not None:
                flashcard.update_back(back)
            if source is not None:
                flashcard.update_source(source)

            flashcard = self.flashcard_repository.save(flashcard)
            self.unit_of_work.commit()

        logger.info("updated_flashcard", flashcard_id=flashcard_id)
        return flashcard
