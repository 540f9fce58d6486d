"""
Base class for Domain Events.

Domain Events are immutable facts about something that already happened
(``GuideChallengeAdded``, not ``AddChallenge``). Integration consumers receive
them through the event publisher once the originating transaction commits.

Example:
    @dataclass(frozen=True)
    class GuideChallengeAdded(DomainEvent):
        guide_id: GuideId
        challenge_id: ChallengeId
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for Domain Events.

    Subclasses are frozen dataclasses named in past tense. Positional fields of
    subclasses come after the keyword-only metadata below.
    """

    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC), kw_only=True)

    @property
    def event_type(self) -> str:
        """Return the event type name for serialization."""
        return self.__class__.__name__

    def to_dict(self) -> dict[str, object]:
        """Convert event to a JSON-friendly dictionary."""
        result: dict[str, object] = {}
        for key, value in self.__dict__.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif isinstance(value, UUID):
                result[key] = str(value)
            elif hasattr(value, "to_primitive"):
                result[key] = value.to_primitive()
            else:
                result[key] = value
        result["event_type"] = self.event_type
        return result
