from .course import COURSE_STATUS_TRANSITIONS, Course, CourseStatus, DifficultyLevel

__all__ = [
    "COURSE_STATUS_TRANSITIONS",
    "Course",
    "CourseStatus",
    "DifficultyLevel",
]
