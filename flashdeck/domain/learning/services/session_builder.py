"""Domain service selecting the deck of a new study session."""

import random
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any, Protocol

from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.exceptions import NoCardsAvailableError
from flashdeck.domain.learning.scheduling_config import SchedulingConfig


class Shuffler(Protocol):
    """Anything that shuffles a list in place; random.Random qualifies."""

    def shuffle(self, x: MutableSequence[Any]) -> None: ...


@dataclass(frozen=True)
class CardPartition:
    """A collection split into reviewed-and-due cards and never-reviewed cards."""

    due: list[Flashcard]
    new: list[Flashcard]

    @property
    def is_empty(self) -> bool:
        return not self.due and not self.new


@dataclass(frozen=True)
class DeckQuota:
    """How many due and new cards a session takes."""

    due: int
    new: int

    @property
    def total(self) -> int:
        return self.due + self.new


@dataclass(frozen=True)
class SessionStats:
    due_count: int
    new_count: int


def end_of_day(now: datetime, tz: tzinfo | None = None) -> datetime:
    """
    Last representable millisecond of now's calendar day.

    Args:
        now: Timezone-aware reference instant
        tz: Zone defining the calendar day; None uses the server's local zone
    """
    local = now.astimezone(tz)
    return local.replace(hour=23, minute=59, second=59, microsecond=999000)


class SessionBuilder:
    """
    Picks a bounded, mixed batch of due and new cards.

    Due cards are taken most overdue first, new cards in collection order,
    then the batch is shuffled so the two kinds interleave.
    """

    def __init__(
        self,
        config: SchedulingConfig | None = None,
        shuffler: Shuffler | None = None,
    ) -> None:
        self.config = config or SchedulingConfig()
        self.shuffler: Shuffler = shuffler or random.Random()

    def partition(self, flashcards: Sequence[Flashcard], now: datetime) -> CardPartition:
        """
        Split a collection into due and new cards.

        Cards due after the end of today are left out. Due cards are sorted by
        due date; the sort is stable so ties keep collection order.
        """
        cutoff = end_of_day(now, self.config.timezone)
        due = [card for card in flashcards if card.review_state.is_due_by(cutoff)]
        new = [card for card in flashcards if card.is_new]
        due.sort(key=lambda card: card.review_state.due_at)  # type: ignore[arg-type,return-value]
        return CardPartition(due=due, new=new)

    def quota(self, due_available: int, new_available: int) -> DeckQuota:
        """
        Decide how many due and new cards to take.

        New cards are reserved first (up to max_new), due cards fill the rest
        of max_total. When due cards run short the remaining room may go to
        more new cards, but never past max_new.
        """
        max_total = self.config.max_total
        max_new = self.config.max_new

        num_new = min(new_available, max_new)
        num_due = min(due_available, max_total - num_new)

        if num_due + num_new < max_total and new_available > num_new:
            num_new = min(new_available, max_total - num_due, max_new)

        return DeckQuota(due=num_due, new=num_new)

    def build(self, flashcards: Sequence[Flashcard], now: datetime) -> list[Flashcard]:
        """
        Select and shuffle the deck for a new session.

        Args:
            flashcards: The user's whole collection, in collection order
            now: Instant the session is requested

        Returns:
            Deck in presentation order

        Raises:
            NoCardsAvailableError: If no card is due today and none is new
        """
        partition = self.partition(flashcards, now)
        if partition.is_empty:
            raise NoCardsAvailableError()

        quota = self.quota(len(partition.due), len(partition.new))
        deck = partition.due[: quota.due] + partition.new[: quota.new]
        self.shuffler.shuffle(deck)
        return deck

    def stats(self, flashcards: Sequence[Flashcard], now: datetime) -> SessionStats:
        """Count due and new cards using the same partition as build()."""
        partition = self.partition(flashcards, now)
        return SessionStats(due_count=len(partition.due), new_count=len(partition.new))
