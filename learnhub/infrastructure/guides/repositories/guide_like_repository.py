"""Repository for GuideLike entities."""

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from learnhub.domain.common.value_objects.ids import GuideId, UserId
from learnhub.domain.guides.entities.guide_like import GuideLike
from learnhub.infrastructure.guides.mappers.guide_like_mapper import GuideLikeMapper
from learnhub.models import GuideLike as GuideLikeORM


class GuideLikeRepository:
    """Repository for GuideLike entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = GuideLikeMapper()

    def find(self, guide_id: GuideId, user_id: UserId) -> GuideLike | None:
        stmt = select(GuideLikeORM).where(
            GuideLikeORM.guide_id == guide_id.value,
            GuideLikeORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def exists(self, guide_id: GuideId, user_id: UserId) -> bool:
        return self.find(guide_id, user_id) is not None

    def save(self, guide_like: GuideLike) -> GuideLike:
        self.db.add(self.mapper.to_orm(guide_like))
        self.db.flush()
        return guide_like

    def delete(self, guide_like: GuideLike) -> None:
        orm_model = self.db.get(GuideLikeORM, guide_like.id.value)
        if orm_model:
            self.db.delete(orm_model)
            self.db.flush()

    def find_liked_guide_ids(self, user_id: UserId, guide_ids: Iterable[GuideId]) -> set[GuideId]:
        """
        Get the subset of guide_ids the user has liked in a single query.

        Args:
            user_id: The user ID
            guide_ids: Guides to check

        Returns:
            Set of liked guide IDs
        """
        id_values = [guide_id.value for guide_id in guide_ids]
        if not id_values:
            return set()

        stmt = select(GuideLikeORM.guide_id).where(
            GuideLikeORM.user_id == user_id.value,
            GuideLikeORM.guide_id.in_(id_values),
        )
        return {GuideId(guide_id) for guide_id in self.db.execute(stmt).scalars().all()}
