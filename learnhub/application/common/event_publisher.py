"""Protocol for publishing integration events to a message broker."""

from typing import Protocol


class EventPublisherProtocol(Protocol):
    """Publishes JSON-friendly event payloads to a named topic."""

    def publish(self, topic: str, key: str, event: dict[str, object]) -> None:
        """
        Publish an event.

        Args:
            topic: Destination topic or stream name
            key: Partitioning key (the aggregate id)
            event: JSON-friendly payload
        """
        ...
