"""Repository for Guide aggregates."""

from collections.abc import Iterable

from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.orm import Session

from learnhub.application.common.pagination import Pagination
from learnhub.application.guides.protocols.guide_repository import GuideSearchCriteria
from learnhub.domain.common.value_objects.ids import GuideId
from learnhub.domain.guides.entities.guide import Guide, GuideStatus
from learnhub.infrastructure.guides.mappers.guide_mapper import GuideMapper
from learnhub.models import Guide as GuideORM
from learnhub.models import GuideAuthor as GuideAuthorORM
from learnhub.models import GuideTopic as GuideTopicORM


class GuideRepository:
    """Repository for Guide aggregates. Soft-deleted guides are filtered out everywhere."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = GuideMapper()

    def find_by_id(self, guide_id: GuideId) -> Guide | None:
        """
        Find a guide by ID.

        Args:
            guide_id: The guide ID

        Returns:
            Guide entity with its pages if found and not deleted, None otherwise
        """
        stmt = select(GuideORM).where(
            GuideORM.id == guide_id.value,
            GuideORM.deleted_at.is_(None),
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_ids(self, guide_ids: Iterable[GuideId]) -> list[Guide]:
        id_values = [guide_id.value for guide_id in guide_ids]
        if not id_values:
            return []

        stmt = select(GuideORM).where(
            GuideORM.id.in_(id_values),
            GuideORM.deleted_at.is_(None),
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, guide: Guide) -> Guide:
        """
        Save a guide (create or update) with its pages and associations.

        Args:
            guide: The guide entity to save

        Returns:
            The saved guide entity
        """
        orm_model = self.db.get(GuideORM, guide.id.value)
        if orm_model is None:
            self.db.add(self.mapper.to_orm(guide))
        else:
            self.mapper.to_orm(guide, orm_model)
        self.db.flush()
        return guide

    def search(
        self, criteria: GuideSearchCriteria, pagination: Pagination
    ) -> tuple[list[Guide], int]:
        """
        Search guides visible to the viewer.

        Args:
            criteria: Filters and viewer description
            pagination: Page to return

        Returns:
            Tuple of (guides newest first, total number of matches)
        """
        conditions = self._build_conditions(criteria)

        count_stmt = select(func.count(GuideORM.id)).where(*conditions)
        total = self.db.execute(count_stmt).scalar() or 0

        stmt = (
            select(GuideORM)
            .where(*conditions)
            .order_by(GuideORM.created_at.desc(), GuideORM.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models], total

    def _build_conditions(self, criteria: GuideSearchCriteria) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = [GuideORM.deleted_at.is_(None)]

        if not criteria.viewer_is_admin:
            published = GuideORM.status == GuideStatus.PUBLISHED.value
            if criteria.viewer_id is None:
                conditions.append(published)
            else:
                authored = GuideORM.id.in_(
                    select(GuideAuthorORM.guide_id).where(
                        GuideAuthorORM.user_id == criteria.viewer_id.value
                    )
                )
                conditions.append(or_(published, authored))

        if criteria.title:
            conditions.append(GuideORM.title.icontains(criteria.title, autoescape=True))
        if criteria.topic_ids:
            conditions.append(
                GuideORM.id.in_(
                    select(GuideTopicORM.guide_id).where(
                        GuideTopicORM.topic_id.in_([t.value for t in criteria.topic_ids])
                    )
                )
            )
        if criteria.author_ids:
            conditions.append(
                GuideORM.id.in_(
                    select(GuideAuthorORM.guide_id).where(
                        GuideAuthorORM.user_id.in_([a.value for a in criteria.author_ids])
                    )
                )
            )
        if criteria.min_likes is not None:
            conditions.append(GuideORM.likes_count >= criteria.min_likes)
        if criteria.status is not None:
            conditions.append(GuideORM.status == criteria.status.value)

        return conditions
