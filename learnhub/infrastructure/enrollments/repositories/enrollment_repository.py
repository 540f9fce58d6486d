"""Repository for Enrollment entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from learnhub.domain.common.value_objects.ids import CourseId, EnrollmentId, UserId
from learnhub.domain.enrollments.entities.enrollment import Enrollment
from learnhub.infrastructure.enrollments.mappers.enrollment_mapper import EnrollmentMapper
from learnhub.models import Enrollment as EnrollmentORM


class EnrollmentRepository:
    """Repository for Enrollment entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = EnrollmentMapper()

    def find_by_id(self, enrollment_id: EnrollmentId) -> Enrollment | None:
        orm_model = self.db.get(EnrollmentORM, enrollment_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user_and_course(self, user_id: UserId, course_id: CourseId) -> Enrollment | None:
        stmt = select(EnrollmentORM).where(
            EnrollmentORM.user_id == user_id.value,
            EnrollmentORM.course_id == course_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user(self, user_id: UserId) -> list[Enrollment]:
        stmt = (
            select(EnrollmentORM)
            .where(EnrollmentORM.user_id == user_id.value)
            .order_by(EnrollmentORM.enrolled_at.desc(), EnrollmentORM.id)
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_by_course(self, course_id: CourseId) -> list[Enrollment]:
        stmt = (
            select(EnrollmentORM)
            .where(EnrollmentORM.course_id == course_id.value)
            .order_by(EnrollmentORM.enrolled_at.desc(), EnrollmentORM.id)
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def save(self, enrollment: Enrollment) -> Enrollment:
        orm_model = self.db.get(EnrollmentORM, enrollment.id.value)
        if orm_model is None:
            self.db.add(self.mapper.to_orm(enrollment))
        else:
            self.mapper.to_orm(enrollment, orm_model)
        self.db.flush()
        return enrollment
