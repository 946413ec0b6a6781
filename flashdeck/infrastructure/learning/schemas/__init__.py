from .flashcard_schemas import (
    Flashcard,
    FlashcardCreateRequest,
    FlashcardCreateResponse,
    FlashcardDeleteResponse,
    FlashcardResponse,
    FlashcardsListResponse,
    FlashcardUpdateRequest,
    FlashcardUpdateResponse,
    PaginationInfo,
)
from .study_session_schemas import (
    SessionItem,
    SessionItemCreateRequest,
    SessionItemCreateResponse,
    StudySession,
    StudySessionCreateResponse,
    StudySessionDetailsResponse,
    StudySessionStatsResponse,
    StudySessionUpdateRequest,
    StudySessionUpdateResponse,
)

__all__ = [
    "Flashcard",
    "FlashcardCreateRequest",
    "FlashcardCreateResponse",
    "FlashcardDeleteResponse",
    "FlashcardResponse",
    "FlashcardUpdateRequest",
    "FlashcardUpdateResponse",
    "FlashcardsListResponse",
    "PaginationInfo",
    "SessionItem",
    "SessionItemCreateRequest",
    "SessionItemCreateResponse",
    "StudySession",
    "StudySessionCreateResponse",
    "StudySessionDetailsResponse",
    "StudySessionStatsResponse",
    "StudySessionUpdateRequest",
    "StudySessionUpdateResponse",
]
