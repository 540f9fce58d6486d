"""
Event publisher adapters.

LoggingEventPublisher is used when no broker is configured.
RedisStreamEventPublisher appends each event to a Redis stream named after
the topic, keyed for consumers by the aggregate id.
"""

import json

import redis
import structlog

logger = structlog.get_logger(__name__)


def serialize_event(event: dict[str, object]) -> str:
    """Serialize deterministically so identical events produce identical payloads."""
    return json.dumps(event, sort_keys=True, default=str)


class LoggingEventPublisher:
    """Writes events to the structured log instead of a broker."""

    def publish(self, topic: str, key: str, event: dict[str, object]) -> None:
        logger.info("published_event", topic=topic, key=key, payload=serialize_event(event))


class RedisStreamEventPublisher:
    """Publishes events with XADD to the stream named after the topic."""

    def __init__(self, client: redis.Redis, max_stream_length: int | None = 10_000) -> None:
        self.client = client
        self.max_stream_length = max_stream_length

    @classmethod
    def from_url(cls, url: str, timeout_seconds: float = 2.0) -> "RedisStreamEventPublisher":
        """Connect and write with bounded socket timeouts."""
        client = redis.from_url(
            url, socket_connect_timeout=timeout_seconds, socket_timeout=timeout_seconds
        )
        return cls(client)

    def publish(self, topic: str, key: str, event: dict[str, object]) -> None:
        message_id = self.client.xadd(
            topic,
            {"key": key, "payload": serialize_event(event)},
            maxlen=self.max_stream_length,
            approximate=True,
        )
        logger.debug("published_event", topic=topic, key=key, message_id=message_id)


def build_event_publisher(
    broker_url: str | None, timeout_seconds: float = 2.0
) -> LoggingEventPublisher | RedisStreamEventPublisher:
    """Use the Redis stream publisher when a broker URL is configured."""
    if broker_url:
        return RedisStreamEventPublisher.from_url(broker_url, timeout_seconds)
    return LoggingEventPublisher()
