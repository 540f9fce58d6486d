"""Mapper for Enrollment ORM ↔ Domain conversion."""

from learnhub.domain.common.value_objects.ids import CourseId, EnrollmentId, UserId
from learnhub.domain.enrollments.entities.enrollment import Enrollment, EnrollmentStatus
from learnhub.infrastructure.common.mapping import ensure_utc, ensure_utc_required
from learnhub.models import Enrollment as EnrollmentORM


class EnrollmentMapper:
    """Mapper for Enrollment ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: EnrollmentORM) -> Enrollment:
        return Enrollment.create_with_id(
            id=EnrollmentId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            course_id=CourseId(orm_model.course_id),
            status=EnrollmentStatus(orm_model.status),
            enrolled_at=ensure_utc_required(orm_model.enrolled_at),
            cancelled_at=ensure_utc(orm_model.cancelled_at),
        )

    def to_orm(
        self, domain_entity: Enrollment, orm_model: EnrollmentORM | None = None
    ) -> EnrollmentORM:
        if orm_model:
            orm_model.status = domain_entity.status.value
            orm_model.enrolled_at = domain_entity.enrolled_at
            orm_model.cancelled_at = domain_entity.cancelled_at
            return orm_model

        return EnrollmentORM(
            id=domain_entity.id.value,
            user_id=domain_entity.user_id.value,
            course_id=domain_entity.course_id.value,
            status=domain_entity.status.value,
            enrolled_at=domain_entity.enrolled_at,
            cancelled_at=domain_entity.cancelled_at,
        )
