"""Protocol for Enrollment repository."""

from typing import Protocol

from learnhub.domain.common.value_objects.ids import CourseId, EnrollmentId, UserId
from learnhub.domain.enrollments.entities.enrollment import Enrollment


class EnrollmentRepositoryProtocol(Protocol):
    """Protocol for Enrollment repository operations."""

    def find_by_id(self, enrollment_id: EnrollmentId) -> Enrollment | None: ...

    def find_by_user_and_course(self, user_id: UserId, course_id: CourseId) -> Enrollment | None:
        """Find the single enrollment of a user in a course, whatever its status."""
        ...

    def find_by_user(self, user_id: UserId) -> list[Enrollment]:
        """Get all enrollments of a user, most recent first."""
        ...

    def find_by_course(self, course_id: CourseId) -> list[Enrollment]:
        """Get all enrollments of a course, most recent first."""
        ...

    def save(self, enrollment: Enrollment) -> Enrollment: ...
