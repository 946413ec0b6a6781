"""Protocol for SessionItem repository."""

from typing import Protocol

from flashdeck.domain.common.value_objects.ids import StudySessionId
from flashdeck.domain.learning.entities.session_item import SessionItem


class SessionItemRepositoryProtocol(Protocol):
    def add(self, item: SessionItem) -> SessionItem:
        """Stage a new review record. Items are never updated."""
        ...

    def find_by_session(self, session_id: StudySessionId) -> list[SessionItem]:
        """Items of a session in the order they were recorded."""
        ...
