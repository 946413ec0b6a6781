"""Tests for the SessionBuilder domain service."""

from collections.abc import MutableSequence
from datetime import UTC, datetime, timedelta, timezone
from typing import Any

import pytest

from flashdeck.domain.common.value_objects import FlashcardId, UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.exceptions import NoCardsAvailableError
from flashdeck.domain.learning.scheduling_config import SchedulingConfig
from flashdeck.domain.learning.services.session_builder import SessionBuilder, end_of_day
from flashdeck.domain.learning.value_objects.review_state import ReviewState

NOW = datetime(2024, 3, 10, 9, 0, tzinfo=UTC)


class KeepOrder:
    """Shuffler that leaves the deck as selected."""

    def shuffle(self, x: MutableSequence[Any]) -> None:
        pass


class Reverse:
    def __init__(self) -> None:
        self.calls = 0

    def shuffle(self, x: MutableSequence[Any]) -> None:
        self.calls += 1
        x.reverse()


_next_id = iter(range(1, 1_000_000))


def _card(due_at: datetime | None = None, interval: int = 1) -> Flashcard:
    state = (
        ReviewState.initial()
        if due_at is None
        else ReviewState(interval_days=interval, due_at=due_at, last_reviewed_at=due_at)
    )
    return Flashcard.create_with_id(
        id=FlashcardId(next(_next_id)),
        user_id=UserId(1),
        front="Q",
        back="A",
        source="manual",
        review_state=state,
    )


def _due(count: int) -> list[Flashcard]:
    return [_card(due_at=NOW - timedelta(days=i + 1)) for i in range(count)]


def _new(count: int) -> list[Flashcard]:
    return [_card() for _ in range(count)]


def _builder(**config: Any) -> SessionBuilder:
    return SessionBuilder(SchedulingConfig(timezone=UTC, **config), shuffler=KeepOrder())


class TestQuota:
    @pytest.mark.parametrize(
        ("due", "new", "expected_due", "expected_new"),
        [
            (5, 2, 5, 2),
            (0, 50, 0, 10),
            (40, 15, 20, 10),
            (40, 0, 30, 0),
            (25, 15, 20, 10),
            (19, 3, 19, 3),
            (0, 1, 0, 1),
            (1, 0, 1, 0),
            (20, 10, 20, 10),
            (30, 10, 20, 10),
            (0, 10, 0, 10),
            (0, 11, 0, 10),
        ],
    )
    def test_boundaries(self, due: int, new: int, expected_due: int, expected_new: int) -> None:
        quota = _builder().quota(due, new)

        assert (quota.due, quota.new) == (expected_due, expected_new)
        assert quota.total <= 30
        assert quota.new <= 10

    def test_small_caps(self) -> None:
        quota = _builder(max_total=5, max_new=2).quota(1, 10)

        assert (quota.due, quota.new) == (1, 2)


class TestPartition:
    def test_splits_due_new_and_future(self) -> None:
        due = _card(due_at=NOW - timedelta(days=2))
        later_today = _card(due_at=NOW + timedelta(hours=10))
        tomorrow = _card(due_at=NOW + timedelta(days=1))
        new = _card()

        partition = _builder().partition([tomorrow, new, later_today, due], NOW)

        assert partition.due == [due, later_today]
        assert partition.new == [new]

    def test_most_overdue_first_and_stable(self) -> None:
        same = NOW - timedelta(days=1)
        a = _card(due_at=same)
        b = _card(due_at=NOW - timedelta(days=5))
        c = _card(due_at=same)

        partition = _builder().partition([a, b, c], NOW)

        assert partition.due == [b, a, c]

    def test_end_of_day_uses_configured_zone(self) -> None:
        tokyo = timezone(timedelta(hours=9))
        # 09:00 UTC is 18:00 in UTC+9; the local day ends at 14:59:59.999 UTC
        card = _card(due_at=NOW + timedelta(hours=7))

        builder = SessionBuilder(SchedulingConfig(timezone=tokyo), shuffler=KeepOrder())

        assert builder.partition([card], NOW).due == []
        assert _builder().partition([card], NOW).due == [card]


class TestBuild:
    def test_exhaustion_policy(self) -> None:
        deck = _builder().build(_due(5) + _new(2), NOW)

        assert len(deck) == 7
        assert sum(1 for card in deck if card.is_new) == 2

    def test_new_card_cap_binds(self) -> None:
        deck = _builder().build(_new(50), NOW)

        assert len(deck) == 10
        assert all(card.is_new for card in deck)

    def test_takes_most_overdue_and_first_new(self) -> None:
        due = _due(25)
        new = _new(15)

        deck = _builder().build(due + new, NOW)

        most_overdue_first = list(reversed(due))
        assert deck == most_overdue_first[:20] + new[:10]

    def test_caps_hold_for_large_collections(self) -> None:
        for due_count, new_count in [(100, 100), (3, 100), (100, 3), (30, 30)]:
            deck = _builder().build(_due(due_count) + _new(new_count), NOW)
            assert len(deck) <= 30
            assert sum(1 for card in deck if card.is_new) <= 10
            assert len({card.id for card in deck}) == len(deck)

    def test_shuffles_selected_deck(self) -> None:
        shuffler = Reverse()
        due = _due(2)
        new = _new(1)
        builder = SessionBuilder(SchedulingConfig(timezone=UTC), shuffler=shuffler)

        deck = builder.build(due + new, NOW)

        assert shuffler.calls == 1
        assert deck == [new[0], due[0], due[1]]

    def test_empty_collection(self) -> None:
        with pytest.raises(NoCardsAvailableError):
            _builder().build([], NOW)

    def test_only_future_cards(self) -> None:
        with pytest.raises(NoCardsAvailableError):
            _builder().build([_card(due_at=NOW + timedelta(days=3))], NOW)

    def test_default_shuffler_keeps_selection(self) -> None:
        cards = _due(3) + _new(2)

        deck = SessionBuilder(SchedulingConfig(timezone=UTC)).build(cards, NOW)

        assert sorted(card.id.value for card in deck) == sorted(card.id.value for card in cards)


class TestStats:
    def test_counts(self) -> None:
        cards = _due(3) + _new(4) + [_card(due_at=NOW + timedelta(days=2))]

        stats = _builder().stats(cards, NOW)

        assert (stats.due_count, stats.new_count) == (3, 4)

    def test_idempotent(self) -> None:
        cards = _due(2) + _new(1)
        builder = _builder()

        assert builder.stats(cards, NOW) == builder.stats(cards, NOW)

    def test_counts_are_not_capped(self) -> None:
        stats = _builder().stats(_due(45) + _new(60), NOW)

        assert (stats.due_count, stats.new_count) == (45, 60)


def test_end_of_day() -> None:
    cutoff = end_of_day(NOW, UTC)

    assert cutoff == datetime(2024, 3, 10, 23, 59, 59, 999000, tzinfo=UTC)
