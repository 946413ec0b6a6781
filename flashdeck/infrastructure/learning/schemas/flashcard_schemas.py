"""Pydantic schemas for Flashcard API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from flashdeck.domain.learning.entities.flashcard import Flashcard as FlashcardEntity


class Flashcard(BaseModel):
    """Schema for Flashcard response, schedule included."""

    id: int
    user_id: int
    front: str
    back: str
    source: str | None
    interval_days: int
    ease_factor: float
    repetitions: int
    due_at: datetime | None
    last_reviewed_at: datetime | None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, entity: FlashcardEntity) -> "Flashcard":
        state = entity.review_state
        return cls(
            id=entity.id.value,
            user_id=entity.user_id.value,
            front=entity.front,
            back=entity.back,
            source=entity.source,
            interval_days=state.interval_days,
            ease_factor=state.ease_factor,
            repetitions=state.repetitions,
            due_at=state.due_at,
            last_reviewed_at=state.last_reviewed_at,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


class FlashcardCreateRequest(BaseModel):
    """Schema for creating a new flashcard."""

    front: str = Field(..., min_length=1, max_length=2000, description="Prompt side")
    back: str = Field(..., min_length=1, max_length=2000, description="Answer side")
    source: str | None = Field(
        None, max_length=500, description="Where the card came from; defaults to 'manual'"
    )


class FlashcardCreateResponse(BaseModel):
    """Schema for flashcard creation response."""

    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    flashcard: Flashcard = Field(..., description="Created flashcard")
    warnings: list[str] = Field(default_factory=list, description="Duplicate card warnings")


class FlashcardUpdateRequest(BaseModel):
    """Schema for updating a flashcard."""

    front: str | None = Field(None, min_length=1, max_length=2000, description="New front text")
    back: str | None = Field(None, min_length=1, max_length=2000, description="New back text")
    source: str | None = Field(None, max_length=500, description="New source")


class FlashcardResponse(BaseModel):
    flashcard: Flashcard


class FlashcardUpdateResponse(BaseModel):
    """Schema for flashcard update response."""

    success: bool = Field(..., description="Whether the update was successful")
    message: str = Field(..., description="Response message")
    flashcard: Flashcard = Field(..., description="Updated flashcard")


class FlashcardDeleteResponse(BaseModel):
    """Schema for flashcard deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")


class PaginationInfo(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


class FlashcardsListResponse(BaseModel):
    """Schema for a page of flashcards."""

    flashcards: list[Flashcard] = Field(..., description="Flashcards on this page")
    pagination: PaginationInfo
