"""Guides module domain events."""

from dataclasses import dataclass

from learnhub.domain.common.domain_event import DomainEvent
from learnhub.domain.common.value_objects.ids import ChallengeId, GuideId


@dataclass(frozen=True)
class GuideChallengeAdded(DomainEvent):
    """A challenge was related to a guide."""

    guide_id: GuideId
    challenge_id: ChallengeId
