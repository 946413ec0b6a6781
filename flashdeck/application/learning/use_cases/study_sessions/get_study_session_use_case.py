"""Use case for loading a study session with its deck and ratings."""

from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.protocols.session_item_repository import (
    SessionItemRepositoryProtocol,
)
from flashdeck.application.learning.protocols.study_session_repository import (
    StudySessionRepositoryProtocol,
)
from flashdeck.application.learning.use_cases.dtos.study_session_dtos import StudySessionDetails
from flashdeck.application.learning.use_cases.exceptions import StudySessionNotFoundError
from flashdeck.domain.common.value_objects.ids import StudySessionId, UserId


class GetStudySessionUseCase:
    def __init__(
        self,
        study_session_repository: StudySessionRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        session_item_repository: SessionItemRepositoryProtocol,
    ) -> None:
        self.study_session_repository = study_session_repository
        self.flashcard_repository = flashcard_repository
        self.session_item_repository = session_item_repository

    def get_session(self, session_id: int, user_id: int) -> StudySessionDetails:
        """
        Load a session owned by the user.

        Deck cards deleted since the session started are left out.

        Raises:
            StudySessionNotFoundError: If the session is unknown or not the user's
        """
        user_id_vo = UserId(user_id)
        session = self.study_session_repository.find_by_id(StudySessionId(session_id), user_id_vo)
        if not session:
            raise StudySessionNotFoundError(session_id)

        flashcards = self.flashcard_repository.find_by_ids(list(session.flashcard_ids), user_id_vo)
        items = self.session_item_repository.find_by_session(session.id)
        return StudySessionDetails(session=session, flashcards=flashcards, items=items)
