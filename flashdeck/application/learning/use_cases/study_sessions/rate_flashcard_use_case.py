"""Use case for rating a flashcard inside a study session."""

import structlog

from flashdeck.application.common.clock import Clock, utc_now
from flashdeck.application.common.unit_of_work import UnitOfWork
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.protocols.session_item_repository import (
    SessionItemRepositoryProtocol,
)
from flashdeck.application.learning.protocols.study_session_repository import (
    StudySessionRepositoryProtocol,
)
from flashdeck.application.learning.use_cases.exceptions import (
    FlashcardNotFoundError,
    StudySessionNotFoundError,
)
from flashdeck.domain.common.value_objects.ids import FlashcardId, StudySessionId, UserId
from flashdeck.domain.learning.entities.session_item import SessionItem
from flashdeck.domain.learning.services.review_scheduler import ReviewScheduler
from flashdeck.domain.learning.value_objects.rating import Rating

logger = structlog.get_logger(__name__)


class RateFlashcardUseCase:
    """
    Records one rating and reschedules the rated card.

    The flashcard update and the new session item are written in the same
    unit of work: either both are durable or neither is.
    """

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        study_session_repository: StudySessionRepositoryProtocol,
        session_item_repository: SessionItemRepositoryProtocol,
        review_scheduler: ReviewScheduler,
        unit_of_work: UnitOfWork,
        clock: Clock = utc_now,
    ) -> None:
        self.flashcard_repository = flashcard_repository
        self.study_session_repository = study_session_repository
        self.session_item_repository = session_item_repository
        self.review_scheduler = review_scheduler
        self.unit_of_work = unit_of_work
        self.clock = clock

    def rate_flashcard(
        self,
        session_id: int,
        user_id: int,
        flashcard_id: int,
        rating: int,
    ) -> SessionItem:
        """
        Rate a flashcard.

        Args:
            session_id: Session the rating belongs to
            user_id: ID of the user; both the session and the card must be theirs
            flashcard_id: Card being rated
            rating: -1 (hard), 0 (normal) or 1 (easy)

        Returns:
            The recorded session item

        Raises:
            InvalidRatingError: If rating is not -1, 0 or 1
            StudySessionNotFoundError: If the session is unknown or not the user's
            FlashcardNotFoundError: If the flashcard is unknown or not the user's
            PersistenceError: If the store failed; nothing was recorded
        """
        rating_vo = Rating.from_value(rating)
        user_id_vo = UserId(user_id)
        now = self.clock()

        with self.unit_of_work:
            session = self.study_session_repository.find_by_id(
                StudySessionId(session_id), user_id_vo
            )
            if not session:
                raise StudySessionNotFoundError(session_id)

            flashcard = self.flashcard_repository.find_by_id(FlashcardId(flashcard_id), user_id_vo)
            if not flashcard:
                raise FlashcardNotFoundError(flashcard_id)

            next_state = self.review_scheduler.review(flashcard, rating_vo, now)
            self.unit_of_work.track(flashcard)
            self.flashcard_repository.save(flashcard)

            item = self.session_item_repository.add(
                SessionItem.record(
                    session_id=session.id,
                    flashcard_id=flashcard.id,
                    rating=rating_vo,
                    created_at=now,
                )
            )
            self.unit_of_work.commit()

        logger.info(
            "flashcard_reviewed",
            session_id=session_id,
            flashcard_id=flashcard_id,
            rating=int(rating_vo),
            in_deck=session.contains(flashcard.id),
            session_active=session.is_active,
            interval_days=next_state.interval_days,
            ease_factor=next_state.ease_factor,
        )
        return item
