"""Protocol for Topic repository."""

from collections.abc import Iterable
from typing import Protocol

from learnhub.domain.common.value_objects.ids import TopicId
from learnhub.domain.topics.entities.topic import Topic


class TopicRepositoryProtocol(Protocol):
    """Protocol for Topic repository operations."""

    def find_by_id(self, topic_id: TopicId) -> Topic | None: ...

    def find_by_name(self, name: str) -> Topic | None:
        """Find a topic by its exact (trimmed) name."""
        ...

    def find_by_ids(self, topic_ids: Iterable[TopicId]) -> list[Topic]:
        """
        Get the topics that exist among the given ids.

        Returns:
            Topics ordered by name; missing ids are simply absent
        """
        ...

    def find_all(self) -> list[Topic]:
        """Get all topics ordered by name."""
        ...

    def save(self, topic: Topic) -> Topic: ...

    def delete(self, topic_id: TopicId) -> bool:
        """
        Delete a topic together with its guide and course associations.

        Returns:
            True if deleted, False if not found
        """
        ...
