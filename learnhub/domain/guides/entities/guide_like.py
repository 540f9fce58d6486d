"""GuideLike entity, one user's like of one guide."""

from dataclasses import dataclass
from datetime import UTC, datetime

from learnhub.domain.common.entity import Entity
from learnhub.domain.common.value_objects.ids import GuideId, GuideLikeId, UserId


@dataclass(eq=False)
class GuideLike(Entity[GuideLikeId]):
    """A like is unique per (guide, user); the repository enforces it."""

    id: GuideLikeId
    guide_id: GuideId
    user_id: UserId
    created_at: datetime

    @classmethod
    def create(cls, guide_id: GuideId, user_id: UserId) -> "GuideLike":
        return cls(
            id=GuideLikeId.generate(),
            guide_id=guide_id,
            user_id=user_id,
            created_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls, id: GuideLikeId, guide_id: GuideId, user_id: UserId, created_at: datetime
    ) -> "GuideLike":
        return cls(id=id, guide_id=guide_id, user_id=user_id, created_at=created_at)
