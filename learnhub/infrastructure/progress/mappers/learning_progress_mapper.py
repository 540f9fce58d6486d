"""Mapper for LearningProgress ORM ↔ Domain conversion."""

from learnhub.domain.common.value_objects.ids import LearningProgressId, UserId
from learnhub.domain.progress.entities.learning_progress import (
    LearningEntityType,
    LearningProgress,
    ProgressStatus,
)
from learnhub.infrastructure.common.mapping import ensure_utc
from learnhub.models import LearningProgress as LearningProgressORM


class LearningProgressMapper:
    """Mapper for LearningProgress ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LearningProgressORM) -> LearningProgress:
        return LearningProgress.create_with_id(
            id=LearningProgressId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            entity_type=LearningEntityType(orm_model.entity_type),
            entity_id=orm_model.entity_id,
            status=ProgressStatus(orm_model.status),
            total_items=orm_model.total_items,
            completed_items=orm_model.completed_items,
            progress_percentage=orm_model.progress_percentage,
            total_reading_time_seconds=orm_model.total_reading_time_seconds,
            started_at=ensure_utc(orm_model.started_at),
            completed_at=ensure_utc(orm_model.completed_at),
            updated_at=ensure_utc(orm_model.updated_at),
        )

    def to_orm(
        self, domain_entity: LearningProgress, orm_model: LearningProgressORM | None = None
    ) -> LearningProgressORM:
        if orm_model is None:
            orm_model = LearningProgressORM(
                id=domain_entity.id.value,
                user_id=domain_entity.user_id.value,
                entity_type=domain_entity.entity_type.value,
                entity_id=domain_entity.entity_id,
            )

        orm_model.status = domain_entity.status.value
        orm_model.total_items = domain_entity.total_items
        orm_model.completed_items = domain_entity.completed_items
        orm_model.progress_percentage = domain_entity.progress_percentage
        orm_model.total_reading_time_seconds = domain_entity.total_reading_time_seconds
        orm_model.started_at = domain_entity.started_at
        orm_model.completed_at = domain_entity.completed_at
        orm_model.updated_at = domain_entity.updated_at
        return orm_model
