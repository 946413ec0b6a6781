"""
Unit of Work interface.

Groups every write of one business operation into a single transaction.

Example:
    with self.unit_of_work:
        self.flashcard_repository.save(flashcard)
        self.session_item_repository.add(item)
        self.unit_of_work.commit()
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self

from flashdeck.domain.common import AggregateRoot, DomainEvent


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    - Repositories stage changes; only commit() makes them durable
    - Leaving the context with an exception rolls back
    - Aggregates registered with track() have their domain events
      collected after a successful commit
    """

    def __init__(self) -> None:
        self._tracked: list[AggregateRoot] = []

    @abstractmethod
    def _commit(self) -> None:
        """Make staged changes durable."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Discard staged changes."""
        raise NotImplementedError

    def track(self, aggregate: AggregateRoot) -> None:
        """Register an aggregate whose events should be published on commit."""
        self._tracked.append(aggregate)

    def commit(self) -> list[DomainEvent]:
        """
        Commit the current transaction.

        Returns:
            Domain events recorded by tracked aggregates
        """
        self._commit()
        events: list[DomainEvent] = []
        for aggregate in self._tracked:
            events.extend(aggregate.collect_events())
        self._tracked.clear()
        self._publish(events)
        return events

    def _publish(self, events: list[DomainEvent]) -> None:
        """Hook for dispatching events after commit; no-op by default."""
        _ = events

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Roll back if the block raised; commit must be called explicitly."""
        if exc_type is not None:
            self.rollback()
            self._tracked.clear()
