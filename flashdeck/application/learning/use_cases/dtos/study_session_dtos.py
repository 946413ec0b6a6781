"""DTOs for study session use cases."""

from dataclasses import dataclass

from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.entities.session_item import SessionItem
from flashdeck.domain.learning.entities.study_session import StudySession


@dataclass
class StartedStudySession:
    """A persisted session and its deck in presentation order."""

    session: StudySession
    flashcards: list[Flashcard]


@dataclass
class StudySessionDetails:
    """A session, its deck and the ratings recorded so far."""

    session: StudySession
    flashcards: list[Flashcard]
    items: list[SessionItem]
