"""Routes committed domain events to the event publisher."""

import structlog

from learnhub.application.common.event_publisher import EventPublisherProtocol
from learnhub.domain.common.domain_event import DomainEvent
from learnhub.domain.guides.events import GuideChallengeAdded

logger = structlog.get_logger(__name__)


class DomainEventDispatcher:
    """
    Publishes integration events for the domain events that have one.

    Dispatch is fire-and-forget: a failing publisher is logged and never
    fails the operation that already committed.
    """

    def __init__(self, publisher: EventPublisherProtocol, guide_challenge_added_topic: str) -> None:
        self.publisher = publisher
        self.guide_challenge_added_topic = guide_challenge_added_topic

    def __call__(self, event: DomainEvent) -> None:
        self.dispatch(event)

    def dispatch(self, event: DomainEvent) -> None:
        route = self._route(event)
        if route is None:
            logger.debug("unrouted_domain_event", event_type=event.event_type)
            return

        topic, key = route
        try:
            self.publisher.publish(topic, key, event.to_dict())
        except Exception:
            logger.exception(
                "event_publish_failed",
                event_type=event.event_type,
                event_id=str(event.event_id),
                topic=topic,
            )

    def _route(self, event: DomainEvent) -> tuple[str, str] | None:
        if isinstance(event, GuideChallengeAdded):
            return self.guide_challenge_added_topic, str(event.guide_id)
        return None
