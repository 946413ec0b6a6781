"""SQLAlchemy implementation of the unit of work port."""

from types import TracebackType

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from flashdeck.application.common.unit_of_work import UnitOfWork
from flashdeck.domain.common.domain_event import DomainEvent
from flashdeck.exceptions import PersistenceError

logger = structlog.get_logger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    Commits or rolls back the request-scoped session shared with the repositories.

    Store failures inside the block (a repository flush as well as the
    final commit) leave it as PersistenceError after the rollback.
    """

    def __init__(self, db: Session) -> None:
        super().__init__()
        self.db = db

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("commit_failed", error=str(e), exc_info=True)
            raise PersistenceError() from e

    def rollback(self) -> None:
        self.db.rollback()

    def _publish(self, events: list[DomainEvent]) -> None:
        for event in events:
            logger.info("domain_event", **event.to_dict())

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        super().__exit__(exc_type, exc_val, exc_tb)
        if isinstance(exc_val, SQLAlchemyError):
            logger.error("transaction_failed", error=str(exc_val), exc_info=exc_val)
            raise PersistenceError() from exc_val
