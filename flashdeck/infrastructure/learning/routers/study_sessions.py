"""API routes for study sessions."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from flashdeck.application.learning.use_cases.study_sessions.create_study_session_use_case import (
    CreateStudySessionUseCase,
)
from flashdeck.application.learning.use_cases.study_sessions.end_study_session_use_case import (
    EndStudySessionUseCase,
)
from flashdeck.application.learning.use_cases.study_sessions.get_session_stats_use_case import (
    GetSessionStatsUseCase,
)
from flashdeck.application.learning.use_cases.study_sessions.get_study_session_use_case import (
    GetStudySessionUseCase,
)
from flashdeck.application.learning.use_cases.study_sessions.rate_flashcard_use_case import (
    RateFlashcardUseCase,
)
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.identity.entities.user import User
from flashdeck.exceptions import FlashdeckError, ServiceError, ValidationError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.identity.dependencies import get_current_user
from flashdeck.infrastructure.learning.schemas import (
    Flashcard,
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

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["study-sessions"])

UNEXPECTED_ERROR_DETAIL = "An unexpected error occurred. Please try again later."


@router.get(
    "/stats",
    response_model=StudySessionStatsResponse,
    status_code=status.HTTP_200_OK,
)
def get_session_stats(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: GetSessionStatsUseCase = Depends(
        inject_use_case(container.get_session_stats_use_case)
    ),
) -> StudySessionStatsResponse:
    """Count the cards due by the end of today and the never reviewed cards."""
    try:
        stats = use_case.get_stats(current_user.id.value)
        return StudySessionStatsResponse(due_count=stats.due_count, new_count=stats.new_count)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to compute session stats: {e!s}", exc_info=True)
        raise ServiceError(UNEXPECTED_ERROR_DETAIL) from e


@router.post(
    "",
    response_model=StudySessionCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_study_session(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: CreateStudySessionUseCase = Depends(
        inject_use_case(container.create_study_session_use_case)
    ),
) -> StudySessionCreateResponse:
    """
    Start a study session.

    Returns:
        The session and its flashcards in presentation order

    Raises:
        NoCardsAvailableError: 400 when nothing is due and no card is new
    """
    try:
        started = use_case.create_session(current_user.id.value)
        return StudySessionCreateResponse(
            session=StudySession.from_entity(started.session),
            flashcards=[Flashcard.from_entity(card) for card in started.flashcards],
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create study session: {e!s}", exc_info=True)
        raise ServiceError(UNEXPECTED_ERROR_DETAIL) from e


@router.get(
    "/{session_id}",
    response_model=StudySessionDetailsResponse,
    status_code=status.HTTP_200_OK,
)
def get_study_session(
    session_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: GetStudySessionUseCase = Depends(
        inject_use_case(container.get_study_session_use_case)
    ),
) -> StudySessionDetailsResponse:
    try:
        details = use_case.get_session(session_id, current_user.id.value)
        return StudySessionDetailsResponse(
            session=StudySession.from_entity(details.session),
            flashcards=[Flashcard.from_entity(card) for card in details.flashcards],
            session_items=[SessionItem.from_entity(item) for item in details.items],
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch study session {session_id}: {e!s}", exc_info=True)
        raise ServiceError(UNEXPECTED_ERROR_DETAIL) from e


@router.post(
    "/{session_id}/items",
    response_model=SessionItemCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def rate_flashcard(
    session_id: int,
    request: SessionItemCreateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: RateFlashcardUseCase = Depends(inject_use_case(container.rate_flashcard_use_case)),
) -> SessionItemCreateResponse:
    """
    Rate a flashcard within a session.

    The card's schedule is updated as a side effect and is not part of the
    response.
    """
    try:
        item = use_case.rate_flashcard(
            session_id=session_id,
            user_id=current_user.id.value,
            flashcard_id=request.flashcard_id,
            rating=request.rating,
        )
        return SessionItemCreateResponse(session_item=SessionItem.from_entity(item))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to rate flashcard in session {session_id}: {e!s}", exc_info=True)
        raise ServiceError(UNEXPECTED_ERROR_DETAIL) from e


@router.patch(
    "/{session_id}",
    response_model=StudySessionUpdateResponse,
    status_code=status.HTTP_200_OK,
)
def update_study_session(
    session_id: int,
    request: StudySessionUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: EndStudySessionUseCase = Depends(
        inject_use_case(container.end_study_session_use_case)
    ),
) -> StudySessionUpdateResponse:
    """End a study session."""
    try:
        if request.ended_at is None:
            raise ValidationError("At least one field (ended_at) must be provided", status_code=400)
        session = use_case.end_session(
            session_id=session_id,
            user_id=current_user.id.value,
            ended_at=request.ended_at,
        )
        return StudySessionUpdateResponse(session=StudySession.from_entity(session))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to end study session {session_id}: {e!s}", exc_info=True)
        raise ServiceError(UNEXPECTED_ERROR_DETAIL) from e
