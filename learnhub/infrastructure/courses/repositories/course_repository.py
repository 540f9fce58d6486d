"""Repository for Course aggregates."""

from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.orm import Session

from learnhub.application.common.pagination import Pagination
from learnhub.application.courses.protocols.course_repository import CourseSearchCriteria
from learnhub.domain.common.value_objects.ids import CourseId
from learnhub.domain.courses.entities.course import Course, CourseStatus
from learnhub.infrastructure.courses.mappers.course_mapper import CourseMapper
from learnhub.models import Course as CourseORM
from learnhub.models import CourseAuthor as CourseAuthorORM
from learnhub.models import CourseTopic as CourseTopicORM


class CourseRepository:
    """Repository for Course aggregates."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CourseMapper()

    def find_by_id(self, course_id: CourseId) -> Course | None:
        stmt = select(CourseORM).where(
            CourseORM.id == course_id.value,
            CourseORM.deleted_at.is_(None),
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, course: Course) -> Course:
        orm_model = self.db.get(CourseORM, course.id.value)
        if orm_model is None:
            self.db.add(self.mapper.to_orm(course))
        else:
            self.mapper.to_orm(course, orm_model)
        self.db.flush()
        return course

    def search(
        self, criteria: CourseSearchCriteria, pagination: Pagination
    ) -> tuple[list[Course], int]:
        """
        Search courses visible to the viewer, newest first.

        Returns:
            Tuple of (courses for the requested page, total number of matches)
        """
        conditions: list[ColumnElement[bool]] = [CourseORM.deleted_at.is_(None)]

        if not criteria.viewer_is_admin:
            published = CourseORM.status == CourseStatus.PUBLISHED.value
            if criteria.viewer_id is None:
                conditions.append(published)
            else:
                authored = CourseORM.id.in_(
                    select(CourseAuthorORM.course_id).where(
                        CourseAuthorORM.user_id == criteria.viewer_id.value
                    )
                )
                conditions.append(or_(published, authored))

        if criteria.title:
            conditions.append(CourseORM.title.icontains(criteria.title, autoescape=True))
        if criteria.topic_ids:
            conditions.append(
                CourseORM.id.in_(
                    select(CourseTopicORM.course_id).where(
                        CourseTopicORM.topic_id.in_([t.value for t in criteria.topic_ids])
                    )
                )
            )
        if criteria.author_ids:
            conditions.append(
                CourseORM.id.in_(
                    select(CourseAuthorORM.course_id).where(
                        CourseAuthorORM.user_id.in_([a.value for a in criteria.author_ids])
                    )
                )
            )
        if criteria.status is not None:
            conditions.append(CourseORM.status == criteria.status.value)

        total = self.db.execute(select(func.count(CourseORM.id)).where(*conditions)).scalar() or 0

        stmt = (
            select(CourseORM)
            .where(*conditions)
            .order_by(CourseORM.created_at.desc(), CourseORM.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models], total
