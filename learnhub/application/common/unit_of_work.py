"""
Unit of Work interface.

The Unit of Work keeps track of the aggregates changed by a business
transaction, commits them together and hands their domain events to the
registered handlers once the commit has succeeded.

Example:
    def add_challenge(self, caller: Caller, guide_id: UUID, challenge_id: UUID) -> Guide:
        with self.uow:
            guide = self._load_modifiable_guide(caller, guide_id)
            guide.add_challenge(ChallengeId.parse(challenge_id))
            self.guide_repository.save(guide)
            self.uow.track(guide)
            self.uow.commit()
        return guide
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from types import TracebackType
from typing import Any, Self

from learnhub.domain.common import AggregateRoot, DomainEvent

EventHandler = Callable[[DomainEvent], None]


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    The Unit of Work:
    - Manages database transactions
    - Ensures atomicity of operations
    - Collects domain events from tracked aggregates
    - Dispatches them only after a successful commit
    - Can be used as a context manager

    Infrastructure layer provides concrete implementations
    (e.g., SqlAlchemyUnitOfWork).
    """

    def __init__(self) -> None:
        self._tracked: list[AggregateRoot[Any]] = []
        self._event_handlers: list[EventHandler] = []

    @abstractmethod
    def _commit(self) -> None:
        """Persist all pending changes."""
        raise NotImplementedError

    @abstractmethod
    def _rollback(self) -> None:
        """Discard all pending changes."""
        raise NotImplementedError

    def commit(self) -> None:
        """
        Commit the current transaction, then dispatch the collected events.

        Events of a failed commit are discarded.
        """
        try:
            self._commit()
        except Exception:
            self._discard_events()
            raise
        for event in self.collect_events():
            for handler in self._event_handlers:
                handler(event)

    def rollback(self) -> None:
        """Rollback the current transaction and drop pending events."""
        self._rollback()
        self._discard_events()

    def track(self, *aggregates: AggregateRoot[Any]) -> None:
        """Register aggregates whose events should be dispatched on commit."""
        for aggregate in aggregates:
            if not any(tracked is aggregate for tracked in self._tracked):
                self._tracked.append(aggregate)

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise, do nothing
        (commit must be called explicitly).
        """
        if exc_type is not None:
            self.rollback()

    def collect_events(self) -> list[DomainEvent]:
        """Collect and clear the events of every tracked aggregate."""
        events: list[DomainEvent] = []
        for aggregate in self._tracked:
            events.extend(aggregate.collect_events())
        self._tracked.clear()
        return events

    def register_event_handler(self, handler: EventHandler) -> None:
        """Register a handler called for each domain event after commit."""
        self._event_handlers.append(handler)

    def _discard_events(self) -> None:
        for aggregate in self._tracked:
            aggregate.collect_events()
        self._tracked.clear()
