"""Repository for Flashcard domain entities."""

from sqlalchemy import delete, func, literal, select
from sqlalchemy.orm import Session

from flashdeck.application.common.pagination import Pagination
from flashdeck.application.learning.protocols.flashcard_repository import FlashcardSort
from flashdeck.domain.common.value_objects.ids import FlashcardId, UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper
from flashdeck.models import Flashcard as FlashcardORM
from flashdeck.models import SessionItem as SessionItemORM

SIMILAR_FRONTS_LIMIT = 10


class FlashcardRepository:
    """Repository for Flashcard domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FlashcardMapper()

    def find_by_id(self, flashcard_id: FlashcardId, user_id: UserId) -> Flashcard | None:
        """
        Find a flashcard by ID with user ownership check.

        Args:
            flashcard_id: The flashcard ID
            user_id: The user ID for ownership verification

        Returns:
            Flashcard entity if found and owned by user, None otherwise
        """
        stmt = select(FlashcardORM).where(
            FlashcardORM.id == flashcard_id.value,
            FlashcardORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_ids(self, flashcard_ids: list[FlashcardId], user_id: UserId) -> list[Flashcard]:
        """Load the user's flashcards among flashcard_ids, keeping the order of the ids."""
        if not flashcard_ids:
            return []
        stmt = select(FlashcardORM).where(
            FlashcardORM.id.in_([flashcard_id.value for flashcard_id in flashcard_ids]),
            FlashcardORM.user_id == user_id.value,
        )
        by_id = {orm.id: orm for orm in self.db.execute(stmt).scalars().all()}
        return [
            self.mapper.to_domain(by_id[flashcard_id.value])
            for flashcard_id in flashcard_ids
            if flashcard_id.value in by_id
        ]

    def find_all_for_user(self, user_id: UserId) -> list[Flashcard]:
        """
        Get a user's whole collection.

        Returns:
            Flashcards in insertion order
        """
        stmt = (
            select(FlashcardORM)
            .where(FlashcardORM.user_id == user_id.value)
            .order_by(FlashcardORM.id.asc())
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

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
            user_id: The user ID for ownership verification
            pagination: Page and page size
            search: Case-insensitive substring of the front text
            sort: "created_at" (newest first) or "due" (soonest first, new cards last)

        Returns:
            Tuple of (flashcards on the page, total matching count)
        """
        conditions = [FlashcardORM.user_id == user_id.value]
        if search:
            conditions.append(
                func.lower(FlashcardORM.front).contains(search.lower(), autoescape=True)
            )

        count_stmt = select(func.count(FlashcardORM.id)).where(*conditions)
        total = self.db.execute(count_stmt).scalar() or 0

        stmt = select(FlashcardORM).where(*conditions)
        if sort == "due":
            stmt = stmt.order_by(
                FlashcardORM.due_at.is_(None),
                FlashcardORM.due_at.asc(),
                FlashcardORM.id.asc(),
            )
        else:
            stmt = stmt.order_by(FlashcardORM.created_at.desc(), FlashcardORM.id.desc())
        stmt = stmt.offset(pagination.offset).limit(pagination.limit)

        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models], total

    def find_similar_fronts(
        self, user_id: UserId, front: str, exclude_id: FlashcardId | None = None
    ) -> list[str]:
        """
        Fronts of the user's cards that contain front, or are contained in it.

        Comparison is case-insensitive; at most ten fronts are returned.
        """
        needle = front.lower()
        lowered = func.lower(FlashcardORM.front)
        stmt = (
            select(FlashcardORM.front)
            .where(
                FlashcardORM.user_id == user_id.value,
                lowered.contains(needle, autoescape=True) | literal(needle).contains(lowered),
            )
            .order_by(FlashcardORM.id.asc())
            .limit(SIMILAR_FRONTS_LIMIT)
        )
        if exclude_id is not None:
            stmt = stmt.where(FlashcardORM.id != exclude_id.value)
        return list(self.db.execute(stmt).scalars().all())

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Stage a flashcard entity (create or update).

        Changes are flushed, not committed; the unit of work commits.

        Returns:
            Saved flashcard entity with database-generated values
        """
        if flashcard.id.is_transient:
            orm_model = self.mapper.to_orm(flashcard)
            self.db.add(orm_model)
        else:
            existing = self.db.get(FlashcardORM, flashcard.id.value)
            if not existing:
                raise ValueError(f"Flashcard {flashcard.id.value} not found")
            orm_model = self.mapper.to_orm(flashcard, existing)
        self.db.flush()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, flashcard_id: FlashcardId, user_id: UserId) -> bool:
        """
        Stage deletion of a flashcard and its session items.

        Returns:
            True if deleted, False if not found
        """
        stmt = select(FlashcardORM).where(
            FlashcardORM.id == flashcard_id.value,
            FlashcardORM.user_id == user_id.value,
        )
        flashcard_orm = self.db.execute(stmt).scalar_one_or_none()

        if not flashcard_orm:
            return False

        self.db.execute(
            delete(SessionItemORM).where(SessionItemORM.flashcard_id == flashcard_id.value)
        )
        self.db.delete(flashcard_orm)
        self.db.flush()
        return True
