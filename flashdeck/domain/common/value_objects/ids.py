from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""


@dataclass(frozen=True)
class FlashcardId(EntityId):
    """Strongly-typed flashcard identifier."""


@dataclass(frozen=True)
class StudySessionId(EntityId):
    """Strongly-typed study session identifier."""


@dataclass(frozen=True)
class SessionItemId(EntityId):
    """Strongly-typed session item (review record) identifier."""
