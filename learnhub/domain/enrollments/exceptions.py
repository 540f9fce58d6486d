"""Enrollments module domain exceptions."""

from learnhub.domain.common.exceptions import ConflictError, EntityNotFoundError


class EnrollmentNotFoundError(EntityNotFoundError):
    def __init__(self, enrollment_id: object) -> None:
        super().__init__("Enrollment", enrollment_id)


class DuplicateEnrollmentError(ConflictError):
    """Raised when the user already has an ACTIVE enrollment in the course."""

    def __init__(self, user_id: object, course_id: object) -> None:
        super().__init__(
            f"User {user_id} is already enrolled in course {course_id}",
            {"user_id": str(user_id), "course_id": str(course_id)},
        )
