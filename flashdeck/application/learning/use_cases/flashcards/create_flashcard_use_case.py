"""Use case for creating flashcards."""

import structlog

from flashdeck.application.common.unit_of_work import UnitOfWork
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.use_cases.dtos.flashcard_dtos import CreatedFlashcard
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.scheduling_config import SchedulingConfig
from flashdeck.domain.learning.value_objects.review_state import ReviewState

logger = structlog.get_logger(__name__)


class CreateFlashcardUseCase:
    """Use case for creating flashcards."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        unit_of_work: UnitOfWork,
        scheduling_config: SchedulingConfig | None = None,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.unit_of_work = unit_of_work
        self.scheduling_config = scheduling_config or SchedulingConfig()

    def create_flashcard(
        self,
        user_id: int,
        front: str,
        back: str,
        source: str | None = None,
    ) -> CreatedFlashcard:
        """
        Create a new, never reviewed flashcard.

        Args:
            user_id: ID of the owner
            front: Prompt side
            back: Answer side
            source: Where the card came from; defaults to "manual"

        Returns:
            The created flashcard and warnings about duplicate or similar fronts

        Raises:
            DomainError: If front or back is empty or too long
        """
        user_id_vo = UserId(user_id)

        flashcard = Flashcard.create(
            user_id=user_id_vo,
            front=front,
            back=back,
            source=source,
            initial_state=ReviewState(ease_factor=self.scheduling_config.initial_ease),
        )

        warnings = []
        for existing in self.flashcard_repository.find_similar_fronts(user_id_vo, flashcard.front):
            if existing.lower() == flashcard.front.lower():
                warnings.append(f"Duplicate card found: '{existing}'")
            else:
                warnings.append(f"Similar card found: '{existing}'")

        with self.unit_of_work:
            flashcard = self.flashcard_repository.save(flashcard)
            self.unit_of_work.commit()

        logger.info(
            "created_flashcard",
            flashcard_id=flashcard.id.value,
            user_id=user_id,
            warnings=len(warnings),
        )
        return CreatedFlashcard(flashcard=flashcard, warnings=warnings)
