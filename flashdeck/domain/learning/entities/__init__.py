"""Entities and aggregate roots of the learning context."""

from .flashcard import Flashcard
from .session_item import SessionItem
from .study_session import StudySession

__all__ = ["Flashcard", "SessionItem", "StudySession"]
