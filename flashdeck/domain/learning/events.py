"""Domain events of the learning context."""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.domain.common.domain_event import DomainEvent
from flashdeck.domain.common.value_objects import FlashcardId, StudySessionId, UserId


@dataclass(frozen=True, kw_only=True)
class FlashcardReviewed(DomainEvent):
    flashcard_id: FlashcardId
    user_id: UserId
    rating: int
    interval_days: int
    ease_factor: float
    due_at: datetime


@dataclass(frozen=True, kw_only=True)
class StudySessionStarted(DomainEvent):
    user_id: UserId
    card_count: int


@dataclass(frozen=True, kw_only=True)
class StudySessionEnded(DomainEvent):
    session_id: StudySessionId
    user_id: UserId
    ended_at: datetime
