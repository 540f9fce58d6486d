from .dispatcher import DomainEventDispatcher
from .publishers import (
    LoggingEventPublisher,
    RedisStreamEventPublisher,
    build_event_publisher,
)

__all__ = [
    "DomainEventDispatcher",
    "LoggingEventPublisher",
    "RedisStreamEventPublisher",
    "build_event_publisher",
]
