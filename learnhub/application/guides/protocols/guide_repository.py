"""Protocol for Guide repository."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from learnhub.application.common.pagination import Pagination
from learnhub.domain.common.value_objects.ids import GuideId, TopicId, UserId
from learnhub.domain.guides.entities.guide import Guide, GuideStatus


@dataclass(frozen=True)
class GuideSearchCriteria:
    """
    Filters for guide search.

    viewer_id and viewer_is_admin describe who is searching; results are
    limited to guides that viewer may see.
    """

    title: str | None = None
    topic_ids: frozenset[TopicId] = field(default_factory=frozenset)
    author_ids: frozenset[UserId] = field(default_factory=frozenset)
    min_likes: int | None = None
    status: GuideStatus | None = None
    viewer_id: UserId | None = None
    viewer_is_admin: bool = False


class GuideRepositoryProtocol(Protocol):
    """Protocol for Guide repository operations. Deleted guides are never returned."""

    def find_by_id(self, guide_id: GuideId) -> Guide | None:
        """
        Find a guide with its pages.

        Args:
            guide_id: The guide ID

        Returns:
            Guide entity if found and not deleted, None otherwise
        """
        ...

    def find_by_ids(self, guide_ids: Iterable[GuideId]) -> list[Guide]:
        """Get the non-deleted guides among the given ids, in no particular order."""
        ...

    def save(self, guide: Guide) -> Guide:
        """
        Save a guide (create or update), including its pages and associations.

        Args:
            guide: The guide entity to save

        Returns:
            The saved guide entity
        """
        ...

    def search(
        self, criteria: GuideSearchCriteria, pagination: Pagination
    ) -> tuple[list[Guide], int]:
        """
        Search guides visible to the viewer described by the criteria.

        Returns:
            Tuple of (guides for the requested page ordered by newest first,
            total number of matches)
        """
        ...
