"""Pydantic schemas for study session API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field, StrictInt, field_validator

from flashdeck.domain.learning.entities.session_item import SessionItem as SessionItemEntity
from flashdeck.domain.learning.entities.study_session import StudySession as StudySessionEntity
from flashdeck.infrastructure.common.timestamps import to_utc
from flashdeck.infrastructure.learning.schemas.flashcard_schemas import Flashcard


class StudySession(BaseModel):
    id: int
    user_id: int
    started_at: datetime
    ended_at: datetime | None

    @classmethod
    def from_entity(cls, entity: StudySessionEntity) -> "StudySession":
        return cls(
            id=entity.id.value,
            user_id=entity.user_id.value,
            started_at=entity.started_at,
            ended_at=entity.ended_at,
        )


class SessionItem(BaseModel):
    id: int
    session_id: int
    flashcard_id: int
    rating: int
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, entity: SessionItemEntity) -> "SessionItem":
        return cls(
            id=entity.id.value,
            session_id=entity.session_id.value,
            flashcard_id=entity.flashcard_id.value,
            rating=int(entity.rating),
            created_at=entity.created_at,
        )


class StudySessionStatsResponse(BaseModel):
    """Counts shown before a session starts."""

    due_count: int = Field(..., serialization_alias="dueCount")
    new_count: int = Field(..., serialization_alias="newCount")


class StudySessionCreateResponse(BaseModel):
    """A new session and its deck in presentation order."""

    session: StudySession
    flashcards: list[Flashcard]


class SessionItemCreateRequest(BaseModel):
    """Schema for rating a flashcard."""

    flashcard_id: int = Field(..., gt=0, description="ID of the rated flashcard")
    rating: StrictInt = Field(..., description="-1 (hard), 0 (normal) or 1 (easy)")

    @field_validator("rating")
    @classmethod
    def validate_rating(cls, value: int) -> int:
        if value not in (-1, 0, 1):
            raise ValueError("Rating must be -1, 0, or 1")
        return value


class SessionItemCreateResponse(BaseModel):
    session_item: SessionItem


class StudySessionUpdateRequest(BaseModel):
    """Schema for ending a session."""

    ended_at: datetime | None = Field(None, description="When the session ended")

    @field_validator("ended_at")
    @classmethod
    def normalize_ended_at(cls, value: datetime | None) -> datetime | None:
        return to_utc(value) if value is not None else None


class StudySessionUpdateResponse(BaseModel):
    session: StudySession


class StudySessionDetailsResponse(BaseModel):
    """A session with its deck and the ratings recorded so far."""

    session: StudySession
    flashcards: list[Flashcard]
    session_items: list[SessionItem]
