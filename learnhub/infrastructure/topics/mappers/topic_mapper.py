"""Mapper for Topic ORM ↔ Domain conversion."""

from learnhub.domain.common.value_objects.ids import TopicId
from learnhub.domain.topics.entities.topic import Topic
from learnhub.infrastructure.common.mapping import ensure_utc_required
from learnhub.models import Topic as TopicORM


class TopicMapper:
    """Mapper for Topic ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: TopicORM) -> Topic:
        return Topic.create_with_id(
            id=TopicId(orm_model.id),
            name=orm_model.name,
            description=orm_model.description,
            created_at=ensure_utc_required(orm_model.created_at),
            updated_at=ensure_utc_required(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: Topic, orm_model: TopicORM | None = None) -> TopicORM:
        if orm_model:
            orm_model.name = domain_entity.name
            orm_model.description = domain_entity.description
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        return TopicORM(
            id=domain_entity.id.value,
            name=domain_entity.name,
            description=domain_entity.description,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
