"""
Base class for Aggregate Roots.

An aggregate root guards the invariants of everything inside it and is the
only object repositories load and save. Roots record domain events while
they change; the unit of work collects them after a successful commit.

Example:
    @dataclass
    class StudySession(AggregateRoot[StudySessionId]):
        def end(self, ended_at: datetime) -> None:
            self.ended_at = ended_at
            self._record_event(StudySessionEnded(session_id=self.id))
"""

from dataclasses import dataclass, field
from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


@dataclass(eq=False)
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """Base class for Aggregate Roots in the domain model."""

    _events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )

    def _record_event(self, event: DomainEvent) -> None:
        """Record a domain event to be dispatched after persistence."""
        self._events.append(event)

    def collect_events(self) -> list[DomainEvent]:
        """Return and clear the recorded domain events."""
        events = self._events.copy()
        self._events.clear()
        return events

    @property
    def pending_events(self) -> list[DomainEvent]:
        """Return pending events without clearing them."""
        return self._events.copy()
