"""Repository for Topic domain entity."""

from collections.abc import Iterable

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from learnhub.domain.common.value_objects.ids import TopicId
from learnhub.domain.topics.entities.topic import Topic
from learnhub.infrastructure.topics.mappers.topic_mapper import TopicMapper
from learnhub.models import CourseTopic as CourseTopicORM
from learnhub.models import GuideTopic as GuideTopicORM
from learnhub.models import Topic as TopicORM


class TopicRepository:
    """Repository for Topic domain entity."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = TopicMapper()

    def find_by_id(self, topic_id: TopicId) -> Topic | None:
        orm_model = self.db.get(TopicORM, topic_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_name(self, name: str) -> Topic | None:
        stmt = select(TopicORM).where(TopicORM.name == name)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_ids(self, topic_ids: Iterable[TopicId]) -> list[Topic]:
        id_values = [topic_id.value for topic_id in topic_ids]
        if not id_values:
            return []

        stmt = select(TopicORM).where(TopicORM.id.in_(id_values)).order_by(TopicORM.name)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_all(self) -> list[Topic]:
        orm_models = self.db.execute(select(TopicORM).order_by(TopicORM.name)).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, topic: Topic) -> Topic:
        """
        Save a topic entity (create or update).

        Args:
            topic: The topic entity to save

        Returns:
            The saved topic entity
        """
        orm_model = self.db.get(TopicORM, topic.id.value)
        if orm_model is None:
            self.db.add(self.mapper.to_orm(topic))
        else:
            self.mapper.to_orm(topic, orm_model)
        self.db.flush()
        return topic

    def delete(self, topic_id: TopicId) -> bool:
        """
        Delete a topic and its guide/course associations.

        Args:
            topic_id: The topic ID

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(TopicORM, topic_id.value)
        if not orm_model:
            return False

        self.db.execute(delete(GuideTopicORM).where(GuideTopicORM.topic_id == topic_id.value))
        self.db.execute(delete(CourseTopicORM).where(CourseTopicORM.topic_id == topic_id.value))
        self.db.delete(orm_model)
        self.db.flush()
        return True
