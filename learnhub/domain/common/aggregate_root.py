"""
Base class for Aggregate Roots.

An aggregate is a cluster of domain objects changed as one unit. Outside code
holds references to the root only; the root enforces every invariant of the
cluster (a Guide owns its Pages, so page ordering is checked by the Guide).

Example:
    @dataclass(eq=False)
    class Guide(AggregateRoot[GuideId]):
        id: GuideId
        title: str

        def add_challenge(self, challenge_id: ChallengeId) -> None:
            self.related_challenge_ids.add(challenge_id)
            self._record_event(GuideChallengeAdded(self.id, challenge_id))
"""

from dataclasses import dataclass, field
from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


@dataclass(eq=False)
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Base class for Aggregate Roots in the domain model.

    Aggregate Roots:
    - Are loaded and saved as a whole through one repository
    - Validate invariants before any state change is applied
    - Record domain events that are dispatched after commit
    """

    _events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )

    def _record_event(self, event: DomainEvent) -> None:
        """Record a domain event to be dispatched once the unit of work commits."""
        self._events.append(event)

    def collect_events(self) -> list[DomainEvent]:
        """
        Collect and clear all recorded domain events.

        Called by the unit of work after the transaction has been committed.
        """
        events = self._events.copy()
        self._events.clear()
        return events

    @property
    def pending_events(self) -> list[DomainEvent]:
        """Return pending events without clearing them."""
        return self._events.copy()
