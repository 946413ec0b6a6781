"""Tests for study session use cases."""

from collections.abc import Callable, MutableSequence
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from flashdeck.application.learning.use_cases.exceptions import StudySessionNotFoundError
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
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.learning.events import StudySessionEnded, StudySessionStarted
from flashdeck.domain.learning.exceptions import NoCardsAvailableError
from flashdeck.domain.learning.scheduling_config import SchedulingConfig
from flashdeck.domain.learning.services.session_builder import SessionBuilder
from flashdeck.domain.learning.value_objects.review_state import ReviewState
from flashdeck.exceptions import PersistenceError


class KeepOrder:
    def shuffle(self, x: MutableSequence[Any]) -> None:
        pass


def _builder() -> SessionBuilder:
    return SessionBuilder(SchedulingConfig(timezone=UTC), shuffler=KeepOrder())


def _due_state(now: datetime) -> ReviewState:
    return ReviewState(interval_days=1, due_at=now - timedelta(days=1), last_reviewed_at=now)


@pytest.fixture
def create_use_case(
    flashcards: Any, sessions: Any, uow: Any, clock: Callable[[], datetime]
) -> CreateStudySessionUseCase:
    return CreateStudySessionUseCase(flashcards, sessions, _builder(), uow, clock)


class TestCreateStudySession:
    def test_creates_session_over_selected_deck(
        self,
        create_use_case: CreateStudySessionUseCase,
        flashcards: Any,
        sessions: Any,
        uow: Any,
        clock: Callable[[], datetime],
    ) -> None:
        due = flashcards.add_committed(front="due", state=_due_state(clock()))
        new = flashcards.add_committed(front="new")

        started = create_use_case.create_session(1)

        assert started.session.id.value == 1
        assert started.session.started_at == clock()
        assert started.session.flashcard_ids == (due.id, new.id)
        assert started.flashcards == [due, new]
        assert sessions.rows[1].flashcard_ids == (due.id, new.id)
        assert [type(e) for e in uow.published] == [StudySessionStarted]

    def test_no_cards_available(
        self, create_use_case: CreateStudySessionUseCase, sessions: Any, uow: Any
    ) -> None:
        with pytest.raises(NoCardsAvailableError):
            create_use_case.create_session(1)

        assert sessions.rows == {}
        assert uow.commits == 0

    def test_other_users_cards_are_not_selected(
        self, create_use_case: CreateStudySessionUseCase, flashcards: Any
    ) -> None:
        flashcards.add_committed(user_id=2)

        with pytest.raises(NoCardsAvailableError):
            create_use_case.create_session(1)

    def test_failed_commit_stores_nothing(
        self,
        create_use_case: CreateStudySessionUseCase,
        flashcards: Any,
        sessions: Any,
        uow: Any,
    ) -> None:
        flashcards.add_committed()
        uow.fail_commit = True

        with pytest.raises(PersistenceError):
            create_use_case.create_session(1)

        assert sessions.rows == {}
        assert uow.published == []


class TestGetSessionStats:
    def test_counts(self, flashcards: Any, clock: Callable[[], datetime]) -> None:
        flashcards.add_committed(state=_due_state(clock()))
        flashcards.add_committed()
        flashcards.add_committed()
        flashcards.add_committed(
            state=ReviewState(interval_days=5, due_at=clock() + timedelta(days=5))
        )
        use_case = GetSessionStatsUseCase(flashcards, _builder(), clock)

        stats = use_case.get_stats(1)

        assert (stats.due_count, stats.new_count) == (1, 2)
        assert use_case.get_stats(1) == stats


class TestEndStudySession:
    def test_end(
        self,
        create_use_case: CreateStudySessionUseCase,
        flashcards: Any,
        sessions: Any,
        uow: Any,
        clock: Callable[[], datetime],
    ) -> None:
        flashcards.add_committed()
        session_id = create_use_case.create_session(1).session.id.value
        ended_at = clock() + timedelta(minutes=10)

        ended = EndStudySessionUseCase(sessions, uow).end_session(session_id, 1, ended_at)

        assert ended.ended_at == ended_at
        assert sessions.rows[session_id].ended_at == ended_at
        assert isinstance(uow.published[-1], StudySessionEnded)

    def test_end_before_start(
        self,
        create_use_case: CreateStudySessionUseCase,
        flashcards: Any,
        sessions: Any,
        uow: Any,
        clock: Callable[[], datetime],
    ) -> None:
        flashcards.add_committed()
        session_id = create_use_case.create_session(1).session.id.value

        with pytest.raises(DomainError):
            EndStudySessionUseCase(sessions, uow).end_session(
                session_id, 1, clock() - timedelta(minutes=1)
            )

        assert sessions.rows[session_id].ended_at is None

    def test_other_users_session(
        self,
        create_use_case: CreateStudySessionUseCase,
        flashcards: Any,
        sessions: Any,
        uow: Any,
        clock: Callable[[], datetime],
    ) -> None:
        flashcards.add_committed()
        session_id = create_use_case.create_session(1).session.id.value

        with pytest.raises(StudySessionNotFoundError):
            EndStudySessionUseCase(sessions, uow).end_session(session_id, 2, clock())


class TestGetStudySession:
    def test_details_skip_deleted_cards(
        self,
        create_use_case: CreateStudySessionUseCase,
        flashcards: Any,
        sessions: Any,
        items: Any,
    ) -> None:
        kept = flashcards.add_committed(front="kept")
        gone = flashcards.add_committed(front="gone")
        session_id = create_use_case.create_session(1).session.id.value
        del flashcards.rows[gone.id.value]

        details = GetStudySessionUseCase(sessions, flashcards, items).get_session(session_id, 1)

        assert details.session.flashcard_ids == (kept.id, gone.id)
        assert details.flashcards == [kept]
        assert details.items == []

    def test_unknown(self, sessions: Any, flashcards: Any, items: Any) -> None:
        with pytest.raises(StudySessionNotFoundError):
            GetStudySessionUseCase(sessions, flashcards, items).get_session(1, 1)
