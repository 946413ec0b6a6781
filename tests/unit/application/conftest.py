"""In-memory fakes for application use case tests."""

import copy
import dataclasses
from collections.abc import Callable
from datetime import UTC, datetime

import pytest

from flashdeck.application.common.pagination import Pagination
from flashdeck.application.common.unit_of_work import UnitOfWork
from flashdeck.domain.common.domain_event import DomainEvent
from flashdeck.domain.common.value_objects.ids import (
    FlashcardId,
    SessionItemId,
    StudySessionId,
    UserId,
)
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.entities.session_item import SessionItem
from flashdeck.domain.learning.entities.study_session import StudySession
from flashdeck.domain.learning.value_objects.review_state import ReviewState
from flashdeck.exceptions import PersistenceError

NOW = datetime(2024, 6, 1, 10, 0, tzinfo=UTC)


class FakeUnitOfWork(UnitOfWork):
    """Applies staged writes only on a successful commit."""

    def __init__(self, fail_commit: bool = False) -> None:
        super().__init__()
        self.fail_commit = fail_commit
        self.commits = 0
        self.rollbacks = 0
        self.published: list[DomainEvent] = []
        self._pending: list[Callable[[], None]] = []

    def stage(self, write: Callable[[], None]) -> None:
        self._pending.append(write)

    def _commit(self) -> None:
        if self.fail_commit:
            self._pending.clear()
            raise PersistenceError()
        for write in self._pending:
            write()
        self._pending.clear()
        self.commits += 1

    def rollback(self) -> None:
        self._pending.clear()
        self.rollbacks += 1

    def _publish(self, events: list[DomainEvent]) -> None:
        self.published.extend(events)


class FakeFlashcardRepository:
    def __init__(self, uow: FakeUnitOfWork) -> None:
        self.uow = uow
        self.rows: dict[int, Flashcard] = {}
        self._next_id = 1

    def add_committed(
        self, user_id: int = 1, front: str = "Q", state: ReviewState | None = None
    ) -> Flashcard:
        card = Flashcard.create_with_id(
            id=FlashcardId(self._next_id),
            user_id=UserId(user_id),
            front=front,
            back="A",
            source="manual",
            review_state=state or ReviewState.initial(),
        )
        self._next_id += 1
        self.rows[card.id.value] = card
        return copy.deepcopy(card)

    def find_by_id(self, flashcard_id: FlashcardId, user_id: UserId) -> Flashcard | None:
        card = self.rows.get(flashcard_id.value)
        if card is None or card.user_id != user_id:
            return None
        return copy.deepcopy(card)

    def find_by_ids(self, flashcard_ids: list[FlashcardId], user_id: UserId) -> list[Flashcard]:
        found = [self.find_by_id(flashcard_id, user_id) for flashcard_id in flashcard_ids]
        return [card for card in found if card is not None]

    def find_all_for_user(self, user_id: UserId) -> list[Flashcard]:
        return [copy.deepcopy(c) for c in self.rows.values() if c.user_id == user_id]

    def search(
        self,
        user_id: UserId,
        pagination: Pagination,
        search: str | None = None,
        sort: str = "created_at",
    ) -> tuple[list[Flashcard], int]:
        cards = self.find_all_for_user(user_id)
        if search:
            cards = [c for c in cards if search.lower() in c.front.lower()]
        cards.reverse()
        return cards[pagination.offset : pagination.offset + pagination.limit], len(cards)

    def find_similar_fronts(
        self, user_id: UserId, front: str, exclude_id: FlashcardId | None = None
    ) -> list[str]:
        needle = front.lower()
        return [
            c.front
            for c in self.find_all_for_user(user_id)
            if c.id != exclude_id and (needle in c.front.lower() or c.front.lower() in needle)
        ]

    def save(self, flashcard: Flashcard) -> Flashcard:
        saved = copy.deepcopy(flashcard)
        saved.collect_events()
        if saved.id.is_transient:
            saved.id = FlashcardId(self._next_id)
            self._next_id += 1
        self.uow.stage(lambda: self.rows.__setitem__(saved.id.value, saved))
        return copy.deepcopy(saved)

    def delete(self, flashcard_id: FlashcardId, user_id: UserId) -> bool:
        if self.find_by_id(flashcard_id, user_id) is None:
            return False
        self.uow.stage(lambda: self.rows.pop(flashcard_id.value))
        return True


class FakeStudySessionRepository:
    def __init__(self, uow: FakeUnitOfWork) -> None:
        self.uow = uow
        self.rows: dict[int, StudySession] = {}
        self._next_id = 1

    def find_by_id(self, session_id: StudySessionId, user_id: UserId) -> StudySession | None:
        session = self.rows.get(session_id.value)
        if session is None or session.user_id != user_id:
            return None
        return copy.deepcopy(session)

    def save(self, session: StudySession) -> StudySession:
        saved = copy.deepcopy(session)
        saved.collect_events()
        if saved.id.is_transient:
            saved.id = StudySessionId(self._next_id)
            self._next_id += 1
        self.uow.stage(lambda: self.rows.__setitem__(saved.id.value, saved))
        return copy.deepcopy(saved)


class FakeSessionItemRepository:
    def __init__(self, uow: FakeUnitOfWork) -> None:
        self.uow = uow
        self.rows: list[SessionItem] = []

    def add(self, item: SessionItem) -> SessionItem:
        saved = dataclasses.replace(item, id=SessionItemId(len(self.rows) + 1))
        self.uow.stage(lambda: self.rows.append(saved))
        return saved

    def find_by_session(self, session_id: StudySessionId) -> list[SessionItem]:
        return [item for item in self.rows if item.session_id == session_id]


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def flashcards(uow: FakeUnitOfWork) -> FakeFlashcardRepository:
    return FakeFlashcardRepository(uow)


@pytest.fixture
def sessions(uow: FakeUnitOfWork) -> FakeStudySessionRepository:
    return FakeStudySessionRepository(uow)


@pytest.fixture
def items(uow: FakeUnitOfWork) -> FakeSessionItemRepository:
    return FakeSessionItemRepository(uow)


@pytest.fixture
def clock() -> Callable[[], datetime]:
    return lambda: NOW
