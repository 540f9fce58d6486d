from .course_repository import CourseRepository

__all__ = ["CourseRepository"]
