"""Use case for counting due and new flashcards."""

from flashdeck.application.common.clock import Clock, utc_now
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.learning.services.session_builder import SessionBuilder, SessionStats


class GetSessionStatsUseCase:
    """Read-only query; calling it twice without ratings in between gives the same counts."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        session_builder: SessionBuilder,
        clock: Clock = utc_now,
    ) -> None:
        self.flashcard_repository = flashcard_repository
        self.session_builder = session_builder
        self.clock = clock

    def get_stats(self, user_id: int) -> SessionStats:
        flashcards = self.flashcard_repository.find_all_for_user(UserId(user_id))
        return self.session_builder.stats(flashcards, self.clock())
