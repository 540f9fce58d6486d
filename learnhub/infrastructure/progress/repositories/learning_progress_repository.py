"""Repository for LearningProgress entities."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from learnhub.domain.common.value_objects.ids import LearningProgressId, UserId
from learnhub.domain.progress.entities.learning_progress import (
    LearningEntityType,
    LearningProgress,
)
from learnhub.infrastructure.progress.mappers.learning_progress_mapper import (
    LearningProgressMapper,
)
from learnhub.models import LearningProgress as LearningProgressORM


class LearningProgressRepository:
    """Repository for LearningProgress entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = LearningProgressMapper()

    def find_by_id(self, progress_id: LearningProgressId) -> LearningProgress | None:
        orm_model = self.db.get(LearningProgressORM, progress_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user_and_entity(
        self, user_id: UserId, entity_type: LearningEntityType, entity_id: UUID
    ) -> LearningProgress | None:
        stmt = select(LearningProgressORM).where(
            LearningProgressORM.user_id == user_id.value,
            LearningProgressORM.entity_type == entity_type.value,
            LearningProgressORM.entity_id == entity_id,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user(self, user_id: UserId) -> list[LearningProgress]:
        """Get all progress records of a user, most recently updated first."""
        stmt = (
            select(LearningProgressORM)
            .where(LearningProgressORM.user_id == user_id.value)
            .order_by(LearningProgressORM.updated_at.desc(), LearningProgressORM.id)
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def save(self, progress: LearningProgress) -> LearningProgress:
        orm_model = self.db.get(LearningProgressORM, progress.id.value)
        if orm_model is None:
            self.db.add(self.mapper.to_orm(progress))
        else:
            self.mapper.to_orm(progress, orm_model)
        self.db.flush()
        return progress
