"""Protocol for StudySession repository."""

from typing import Protocol

from flashdeck.domain.common.value_objects.ids import StudySessionId, UserId
from flashdeck.domain.learning.entities.study_session import StudySession


class StudySessionRepositoryProtocol(Protocol):
    def find_by_id(self, session_id: StudySessionId, user_id: UserId) -> StudySession | None:
        """Find a session owned by user_id, deck included."""
        ...

    def save(self, session: StudySession) -> StudySession:
        """Stage a session and, for new sessions, its ordered deck."""
        ...
