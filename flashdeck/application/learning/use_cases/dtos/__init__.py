"""DTOs returned by learning use cases."""

from .flashcard_dtos import CreatedFlashcard
from .study_session_dtos import StartedStudySession, StudySessionDetails

__all__ = ["CreatedFlashcard", "StartedStudySession", "StudySessionDetails"]
