"""Mapper for GuideLike ORM ↔ Domain conversion."""

from learnhub.domain.common.value_objects.ids import GuideId, GuideLikeId, UserId
from learnhub.domain.guides.entities.guide_like import GuideLike
from learnhub.infrastructure.common.mapping import ensure_utc_required
from learnhub.models import GuideLike as GuideLikeORM


class GuideLikeMapper:
    def to_domain(self, orm_model: GuideLikeORM) -> GuideLike:
        return GuideLike.create_with_id(
            id=GuideLikeId(orm_model.id),
            guide_id=GuideId(orm_model.guide_id),
            user_id=UserId(orm_model.user_id),
            created_at=ensure_utc_required(orm_model.created_at),
        )

    def to_orm(self, domain_entity: GuideLike) -> GuideLikeORM:
        return GuideLikeORM(
            id=domain_entity.id.value,
            guide_id=domain_entity.guide_id.value,
            user_id=domain_entity.user_id.value,
            created_at=domain_entity.created_at,
        )
