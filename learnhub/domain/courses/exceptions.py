"""Courses module domain exceptions."""

from learnhub.domain.common.exceptions import BusinessRuleViolationError, EntityNotFoundError


class CourseNotFoundError(EntityNotFoundError):
    """Raised when a course does not exist, is deleted or is not visible."""

    def __init__(self, course_id: object) -> None:
        super().__init__("Course", course_id)


class InvalidCourseStatusTransitionError(BusinessRuleViolationError):
    def __init__(self, current: str, requested: str) -> None:
        super().__init__(
            "course_status_transition",
            f"Cannot change course status from {current} to {requested}",
        )
        self.current = current
        self.requested = requested


class GuideNotInCourseError(BusinessRuleViolationError):
    """Raised when removing a guide that is not part of the course."""

    def __init__(self, guide_id: object, course_id: object) -> None:
        super().__init__(
            "guide_not_in_course", f"Guide {guide_id} is not part of course {course_id}"
        )
