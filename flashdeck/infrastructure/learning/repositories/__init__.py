from .flashcard_repository import FlashcardRepository
from .session_item_repository import SessionItemRepository
from .study_session_repository import StudySessionRepository

__all__ = ["FlashcardRepository", "SessionItemRepository", "StudySessionRepository"]
