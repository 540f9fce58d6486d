"""Courses module domain layer."""

from learnhub.domain.courses.entities import Course, CourseStatus, DifficultyLevel
from learnhub.domain.courses.exceptions import (
    CourseNotFoundError,
    GuideNotInCourseError,
    InvalidCourseStatusTransitionError,
)
from learnhub.domain.courses.services import CourseDetails

__all__ = [
    "Course",
    "CourseDetails",
    "CourseNotFoundError",
    "CourseStatus",
    "DifficultyLevel",
    "GuideNotInCourseError",
    "InvalidCourseStatusTransitionError",
]
