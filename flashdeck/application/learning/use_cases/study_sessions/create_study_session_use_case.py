"""Use case for starting a study session."""

import structlog

from flashdeck.application.common.clock import Clock, utc_now
from flashdeck.application.common.unit_of_work import UnitOfWork
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.protocols.study_session_repository import (
    StudySessionRepositoryProtocol,
)
from flashdeck.application.learning.use_cases.dtos.study_session_dtos import StartedStudySession
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.learning.entities.study_session import StudySession
from flashdeck.domain.learning.services.session_builder import SessionBuilder

logger = structlog.get_logger(__name__)


class CreateStudySessionUseCase:
    """Use case for starting a study session."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        study_session_repository: StudySessionRepositoryProtocol,
        session_builder: SessionBuilder,
        unit_of_work: UnitOfWork,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize use case with repository protocols and the session builder."""
        self.flashcard_repository = flashcard_repository
        self.study_session_repository = study_session_repository
        self.session_builder = session_builder
        self.unit_of_work = unit_of_work
        self.clock = clock

    def create_session(self, user_id: int) -> StartedStudySession:
        """
        Select a deck from the user's collection and open a session over it.

        Args:
            user_id: ID of the user

        Returns:
            The persisted session and its flashcards in presentation order

        Raises:
            NoCardsAvailableError: If no card is due today and none is new
            PersistenceError: If the session could not be stored
        """
        user_id_vo = UserId(user_id)
        now = self.clock()

        with self.unit_of_work:
            flashcards = self.flashcard_repository.find_all_for_user(user_id_vo)
            deck = self.session_builder.build(flashcards, now)

            session = StudySession.start(
                user_id=user_id_vo,
                flashcard_ids=[card.id for card in deck],
                started_at=now,
            )
            self.unit_of_work.track(session)
            saved = self.study_session_repository.save(session)
            self.unit_of_work.commit()

        logger.info(
            "study_session_created",
            session_id=saved.id.value,
            user_id=user_id,
            card_count=saved.card_count,
            new_count=sum(1 for card in deck if card.is_new),
        )
        return StartedStudySession(session=saved, flashcards=deck)
