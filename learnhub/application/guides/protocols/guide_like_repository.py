"""Protocol for GuideLike repository."""

from collections.abc import Iterable
from typing import Protocol

from learnhub.domain.common.value_objects.ids import GuideId, UserId
from learnhub.domain.guides.entities.guide_like import GuideLike


class GuideLikeRepositoryProtocol(Protocol):
    """Protocol for GuideLike repository operations."""

    def find(self, guide_id: GuideId, user_id: UserId) -> GuideLike | None: ...

    def exists(self, guide_id: GuideId, user_id: UserId) -> bool: ...

    def save(self, guide_like: GuideLike) -> GuideLike: ...

    def delete(self, guide_like: GuideLike) -> None: ...

    def find_liked_guide_ids(self, user_id: UserId, guide_ids: Iterable[GuideId]) -> set[GuideId]:
        """
        Get the subset of guide_ids the user has liked.

        Args:
            user_id: The user ID
            guide_ids: Guides to check

        Returns:
            Set of liked guide IDs
        """
        ...
