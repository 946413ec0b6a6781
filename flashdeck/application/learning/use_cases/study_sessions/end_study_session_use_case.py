"""Use case for ending a study session."""

from datetime import datetime

import structlog

from flashdeck.application.common.unit_of_work import UnitOfWork
from flashdeck.application.learning.protocols.study_session_repository import (
    StudySessionRepositoryProtocol,
)
from flashdeck.application.learning.use_cases.exceptions import StudySessionNotFoundError
from flashdeck.domain.common.value_objects.ids import StudySessionId, UserId
from flashdeck.domain.learning.entities.study_session import StudySession

logger = structlog.get_logger(__name__)


class EndStudySessionUseCase:
    def __init__(
        self,
        study_session_repository: StudySessionRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.study_session_repository = study_session_repository
        self.unit_of_work = unit_of_work

    def end_session(self, session_id: int, user_id: int, ended_at: datetime) -> StudySession:
        """
        Close a session. Flashcard scheduling is not affected.

        Raises:
            StudySessionNotFoundError: If the session is unknown or not the user's
            DomainError: If ended_at precedes the session start
        """
        with self.unit_of_work:
            session = self.study_session_repository.find_by_id(
                StudySessionId(session_id), UserId(user_id)
            )
            if not session:
                raise StudySessionNotFoundError(session_id)

            session.end(ended_at)
            self.unit_of_work.track(session)
            saved = self.study_session_repository.save(session)
            self.unit_of_work.commit()

        logger.info("study_session_ended", session_id=session_id, user_id=user_id)
        return saved
