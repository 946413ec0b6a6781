"""Protocol for Flashcard repository in learning context."""

from typing import Literal, Protocol

from flashdeck.application.common.pagination import Pagination
from flashdeck.domain.common.value_objects.ids import FlashcardId, UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard

FlashcardSort = Literal["created_at", "due"]


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations in learning context."""

    def find_by_id(self, flashcard_id: FlashcardId, user_id: UserId) -> Flashcard | None:
        """
        Find a flashcard by ID with user ownership check.

        Returns:
            Flashcard entity if found and owned by user, None otherwise
        """
        ...

    def find_by_ids(self, flashcard_ids: list[FlashcardId], user_id: UserId) -> list[Flashcard]:
        """
        Load several flashcards owned by a user.

        Returns:
            Flashcards in the order of flashcard_ids; unknown ids are skipped
        """
        ...

    def find_all_for_user(self, user_id: UserId) -> list[Flashcard]:
        """
        Load a user's whole collection.

        Returns:
            Flashcards in collection (insertion) order
        """
        ...

    def search(
        self,
        user_id: UserId,
        pagination: Pagination,
        search: str | None = None,
        sort: FlashcardSort = "created_at",
    ) -> tuple[list[Flashcard], int]:
        """
        List one page of a user's flashcards.

        Args:
            search: Case-insensitive substring matched against the front
            sort: "created_at" (newest first) or "due" (soonest due first,
                never reviewed cards last)

        Returns:
            (page of flashcards, total matching count)
        """
        ...

    def find_similar_fronts(
        self, user_id: UserId, front: str, exclude_id: FlashcardId | None = None
    ) -> list[str]:
        """Return fronts of the user's cards that contain, or are contained in, front."""
        ...

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Stage a flashcard (create or update) in the current unit of work.

        Returns:
            Flashcard entity carrying database-generated values
        """
        ...

    def delete(self, flashcard_id: FlashcardId, user_id: UserId) -> bool:
        """
        Stage deletion of a flashcard.

        Returns:
            True if deleted, False if not found
        """
        ...
