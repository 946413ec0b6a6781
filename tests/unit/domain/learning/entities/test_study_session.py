"""Tests for StudySession aggregate."""

from datetime import UTC, datetime, timedelta

import pytest

from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.common.value_objects import FlashcardId, StudySessionId, UserId
from flashdeck.domain.learning.entities.study_session import StudySession
from flashdeck.domain.learning.events import StudySessionEnded, StudySessionStarted

STARTED = datetime(2024, 5, 1, 8, tzinfo=UTC)


def _ids(*values: int) -> list[FlashcardId]:
    return [FlashcardId(v) for v in values]


class TestStart:
    def test_start_records_event(self) -> None:
        session = StudySession.start(UserId(1), _ids(3, 1, 2), STARTED)

        assert session.id.is_transient
        assert session.is_active
        assert session.card_count == 3
        assert session.flashcard_ids == tuple(_ids(3, 1, 2))
        events = session.collect_events()
        assert len(events) == 1
        assert isinstance(events[0], StudySessionStarted)
        assert events[0].card_count == 3

    def test_empty_deck_rejected(self) -> None:
        with pytest.raises(DomainError):
            StudySession.start(UserId(1), [], STARTED)

    def test_duplicate_cards_rejected(self) -> None:
        with pytest.raises(DomainError):
            StudySession.start(UserId(1), _ids(1, 1), STARTED)

    def test_contains(self) -> None:
        session = StudySession.start(UserId(1), _ids(4, 5), STARTED)

        assert session.contains(FlashcardId(4))
        assert not session.contains(FlashcardId(6))


class TestEnd:
    def _session(self) -> StudySession:
        return StudySession.create_with_id(
            id=StudySessionId(9),
            user_id=UserId(1),
            started_at=STARTED,
            flashcard_ids=tuple(_ids(1)),
        )

    def test_end(self) -> None:
        session = self._session()
        ended = STARTED + timedelta(minutes=20)

        session.end(ended)

        assert session.ended_at == ended
        assert not session.is_active
        events = session.collect_events()
        assert isinstance(events[0], StudySessionEnded)
        assert events[0].session_id == StudySessionId(9)

    def test_end_at_start_allowed(self) -> None:
        session = self._session()

        session.end(STARTED)

        assert session.ended_at == STARTED

    def test_end_before_start_rejected(self) -> None:
        session = self._session()

        with pytest.raises(DomainError):
            session.end(STARTED - timedelta(seconds=1))
        assert session.is_active

    def test_ending_twice_moves_end_time(self) -> None:
        session = self._session()
        session.end(STARTED + timedelta(minutes=1))

        session.end(STARTED + timedelta(minutes=2))

        assert session.ended_at == STARTED + timedelta(minutes=2)
