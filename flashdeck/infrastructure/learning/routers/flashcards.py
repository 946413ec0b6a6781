"""API routes for flashcard management."""

import logging
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Query, status

from flashdeck.application.common.pagination import MAX_PAGE_SIZE, Pagination
from flashdeck.application.learning.use_cases.flashcards.create_flashcard_use_case import (
    CreateFlashcardUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.delete_flashcard_use_case import (
    DeleteFlashcardUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.get_flashcard_use_case import (
    GetFlashcardUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.list_flashcards_use_case import (
    ListFlashcardsUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.update_flashcard_use_case import (
    UpdateFlashcardUseCase,
)
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.identity.entities.user import User
from flashdeck.exceptions import FlashdeckError, ServiceError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.identity.dependencies import get_current_user
from flashdeck.infrastructure.learning.schemas import (
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

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flashcards", tags=["flashcards"])

UNEXPECTED_ERROR_DETAIL = "An unexpected error occurred. Please try again later."


@router.post(
    "",
    response_model=FlashcardCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_flashcard(
    request: FlashcardCreateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: CreateFlashcardUseCase = Depends(
        inject_use_case(container.create_flashcard_use_case)
    ),
) -> FlashcardCreateResponse:
    """
    Create a flashcard.

    The response lists warnings when cards with the same or an overlapping
    front already exist; the card is created regardless.
    """
    try:
        created = use_case.create_flashcard(
            user_id=current_user.id.value,
            front=request.front,
            back=request.back,
            source=request.source,
        )
        return FlashcardCreateResponse(
            success=True,
            message="Flashcard created successfully",
            flashcard=Flashcard.from_entity(created.flashcard),
            warnings=created.warnings,
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create flashcard: {e!s}", exc_info=True)
        raise ServiceError(UNEXPECTED_ERROR_DETAIL) from e


@router.get(
    "",
    response_model=FlashcardsListResponse,
    status_code=status.HTTP_200_OK,
)
def list_flashcards(
    current_user: Annotated[User, Depends(get_current_user)],
    search: Annotated[str | None, Query(max_length=200)] = None,
    sort: Literal["created_at", "due"] = "created_at",
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = 20,
    use_case: ListFlashcardsUseCase = Depends(
        inject_use_case(container.list_flashcards_use_case)
    ),
) -> FlashcardsListResponse:
    """
    List the current user's flashcards.

    Args:
        search: Case-insensitive substring of the front text
        sort: "created_at" (newest first) or "due" (soonest due first)
        page: Page number, starting at 1
        limit: Page size
    """
    try:
        result = use_case.list_flashcards(
            user_id=current_user.id.value,
            pagination=Pagination(page=page, page_size=limit),
            search=search,
            sort=sort,
        )
        return FlashcardsListResponse(
            flashcards=[Flashcard.from_entity(card) for card in result.items],
            pagination=PaginationInfo(
                page=page,
                limit=limit,
                total=result.total,
                total_pages=result.total_pages,
            ),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list flashcards: {e!s}", exc_info=True)
        raise ServiceError(UNEXPECTED_ERROR_DETAIL) from e


@router.get(
    "/{flashcard_id}",
    response_model=FlashcardResponse,
    status_code=status.HTTP_200_OK,
)
def get_flashcard(
    flashcard_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: GetFlashcardUseCase = Depends(inject_use_case(container.get_flashcard_use_case)),
) -> FlashcardResponse:
    try:
        flashcard = use_case.get_flashcard(flashcard_id, current_user.id.value)
        return FlashcardResponse(flashcard=Flashcard.from_entity(flashcard))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise ServiceError(UNEXPECTED_ERROR_DETAIL) from e


@router.patch(
    "/{flashcard_id}",
    response_model=FlashcardUpdateResponse,
    status_code=status.HTTP_200_OK,
)
def update_flashcard(
    flashcard_id: int,
    request: FlashcardUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UpdateFlashcardUseCase = Depends(
        inject_use_case(container.update_flashcard_use_case)
    ),
) -> FlashcardUpdateResponse:
    """
    Update a flashcard's front, back and/or source.

    Raises:
        FlashcardNotFoundError: If the flashcard is unknown or not the user's
    """
    try:
        flashcard = use_case.update_flashcard(
            flashcard_id=flashcard_id,
            user_id=current_user.id.value,
            front=request.front,
            back=request.back,
            source=request.source,
        )
        return FlashcardUpdateResponse(
            success=True,
            message="Flashcard updated successfully",
            flashcard=Flashcard.from_entity(flashcard),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise ServiceError(UNEXPECTED_ERROR_DETAIL) from e


@router.delete(
    "/{flashcard_id}",
    response_model=FlashcardDeleteResponse,
    status_code=status.HTTP_200_OK,
)
def delete_flashcard(
    flashcard_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: DeleteFlashcardUseCase = Depends(
        inject_use_case(container.delete_flashcard_use_case)
    ),
) -> FlashcardDeleteResponse:
    """Delete a flashcard and the ratings recorded for it."""
    try:
        use_case.delete_flashcard(flashcard_id=flashcard_id, user_id=current_user.id.value)
        return FlashcardDeleteResponse(
            success=True,
            message="Flashcard deleted successfully",
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise ServiceError(UNEXPECTED_ERROR_DETAIL) from e
