"""Common value objects shared across all domain modules."""

from .ids import FlashcardId, SessionItemId, StudySessionId, UserId

__all__ = [
    "FlashcardId",
    "SessionItemId",
    "StudySessionId",
    "UserId",
]
