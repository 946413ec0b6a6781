"""Use case for listing a user's flashcards."""

from flashdeck.application.common.pagination import PaginatedResult, Pagination
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
    FlashcardSort,
)
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard


class ListFlashcardsUseCase:
    """Use case for listing a user's flashcards."""

    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        self.flashcard_repository = flashcard_repository

    def list_flashcards(
        self,
        user_id: int,
        pagination: Pagination,
        search: str | None = None,
        sort: FlashcardSort = "created_at",
    ) -> PaginatedResult[Flashcard]:
        """
        List one page of flashcards.

        Args:
            user_id: ID of the owner
            pagination: Page and page size
            search: Optional substring of the front text
            sort: "created_at" or "due"

        Returns:
            Page of flashcards with the total count
        """
        search = search.strip() if search else None
        items, total = self.flashcard_repository.search(
            UserId(user_id), pagination, search=search or None, sort=sort
        )
        return PaginatedResult(items=items, total=total, pagination=pagination)
