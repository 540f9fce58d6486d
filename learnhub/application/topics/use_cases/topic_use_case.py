"""
Use case for managing topics.

Topics are shared tags; teachers and admins maintain them, everybody can
read them.
"""

from collections.abc import Iterable
from uuid import UUID

import structlog

from learnhub.application.common.unit_of_work import UnitOfWork
from learnhub.application.topics.protocols.topic_repository import TopicRepositoryProtocol
from learnhub.domain.common.value_objects.ids import TopicId
from learnhub.domain.identity.caller import Caller, Role
from learnhub.domain.topics.entities.topic import Topic
from learnhub.domain.topics.exceptions import DuplicateTopicNameError, TopicNotFoundError

logger = structlog.get_logger(__name__)


class TopicUseCase:
    """Use case for topic registry operations."""

    def __init__(self, topic_repository: TopicRepositoryProtocol, uow: UnitOfWork) -> None:
        """
        Initialize use case with dependencies.

        Args:
            topic_repository: Topic repository protocol implementation
            uow: Unit of work wrapping each command
        """
        self.topic_repository = topic_repository
        self.uow = uow

    def create_topic(self, caller: Caller, name: str, description: str | None = None) -> Topic:
        """
        Create a topic.

        Raises:
            AuthorizationError: If the caller is not a teacher or admin
            ValidationError: If the name is blank or too long
            DuplicateTopicNameError: If a topic with that name exists
        """
        caller.require_any_role(Role.TEACHER, Role.ADMIN)
        topic = Topic.create(name, description)

        with self.uow:
            if self.topic_repository.find_by_name(topic.name) is not None:
                raise DuplicateTopicNameError(topic.name)
            topic = self.topic_repository.save(topic)
            self.uow.commit()

        logger.info("created_topic", topic_id=str(topic.id), name=topic.name)
        return topic

    def update_topic(
        self,
        caller: Caller,
        topic_id: UUID | str,
        name: str | None = None,
        description: str | None = None,
    ) -> Topic:
        """
        Rename a topic and/or change its description.

        Raises:
            TopicNotFoundError: If the topic does not exist
            DuplicateTopicNameError: If the new name belongs to another topic
        """
        caller.require_any_role(Role.TEACHER, Role.ADMIN)
        topic_id_vo = TopicId.parse(topic_id)

        with self.uow:
            topic = self.topic_repository.find_by_id(topic_id_vo)
            if topic is None:
                raise TopicNotFoundError(topic_id)

            if name is not None:
                topic.rename(name)
                existing = self.topic_repository.find_by_name(topic.name)
                if existing is not None and existing.id != topic.id:
                    raise DuplicateTopicNameError(topic.name)
            if description is not None:
                topic.update_description(description)

            topic = self.topic_repository.save(topic)
            self.uow.commit()

        logger.info("updated_topic", topic_id=str(topic.id))
        return topic

    def delete_topic(self, caller: Caller, topic_id: UUID | str) -> None:
        """Delete a topic and untag every guide and course that used it."""
        caller.require_any_role(Role.TEACHER, Role.ADMIN)
        topic_id_vo = TopicId.parse(topic_id)

        with self.uow:
            if not self.topic_repository.delete(topic_id_vo):
                raise TopicNotFoundError(topic_id)
            self.uow.commit()

        logger.info("deleted_topic", topic_id=str(topic_id_vo))

    def get_topic(self, topic_id: UUID | str) -> Topic:
        topic = self.topic_repository.find_by_id(TopicId.parse(topic_id))
        if topic is None:
            raise TopicNotFoundError(topic_id)
        return topic

    def get_topic_by_name(self, name: str) -> Topic:
        topic = self.topic_repository.find_by_name((name or "").strip())
        if topic is None:
            raise TopicNotFoundError(name)
        return topic

    def list_topics(self) -> list[Topic]:
        return self.topic_repository.find_all()

    def resolve_topic_ids(self, topic_ids: Iterable[UUID | str | TopicId]) -> set[TopicId]:
        """
        Check that every topic exists.

        Args:
            topic_ids: Raw topic ids

        Returns:
            The ids as value objects

        Raises:
            TopicNotFoundError: Listing every id that does not exist
        """
        requested = {TopicId.parse(topic_id) for topic_id in topic_ids}
        if not requested:
            return set()
        found = {topic.id for topic in self.topic_repository.find_by_ids(requested)}
        missing = requested - found
        if missing:
            raise TopicNotFoundError(sorted(str(topic_id) for topic_id in missing))
        return requested
