"""SQLAlchemy implementation of the Unit of Work port."""

from collections.abc import Iterable
from types import TracebackType

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from learnhub.application.common.unit_of_work import EventHandler, UnitOfWork
from learnhub.domain.common.exceptions import ConflictError
from learnhub.exceptions import ServiceError

logger = structlog.get_logger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of work over a request-scoped SQLAlchemy session.

    Database errors never leave this class raw: unique constraint violations
    become ConflictError, anything else ServiceError.
    """

    def __init__(self, db: Session, event_handlers: Iterable[EventHandler] = ()) -> None:
        super().__init__()
        self.db = db
        for handler in event_handlers:
            self.register_event_handler(handler)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise self._translate(e) from e

    def _rollback(self) -> None:
        self.db.rollback()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        super().__exit__(exc_type, exc_val, exc_tb)
        # Errors raised by a flush inside the block
        if isinstance(exc_val, SQLAlchemyError):
            raise self._translate(exc_val) from exc_val

    @staticmethod
    def _translate(error: SQLAlchemyError) -> Exception:
        if isinstance(error, IntegrityError):
            logger.warning("database_conflict", error=str(error.orig))
            return ConflictError("The change conflicts with existing data")
        logger.error("database_error", error=str(error), exc_info=error)
        return ServiceError("Failed to persist changes")
