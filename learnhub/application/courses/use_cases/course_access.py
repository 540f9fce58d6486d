"""Loading courses with the visibility and ownership checks every use case needs."""

from uuid import UUID

from learnhub.application.courses.protocols.course_repository import CourseRepositoryProtocol
from learnhub.domain.common.value_objects.ids import CourseId
from learnhub.domain.courses.entities.course import Course
from learnhub.domain.courses.exceptions import CourseNotFoundError
from learnhub.domain.identity.caller import Caller


def load_course(
    course_repository: CourseRepositoryProtocol, course_id: UUID | str | CourseId
) -> Course:
    course = course_repository.find_by_id(CourseId.parse(course_id))
    if course is None:
        raise CourseNotFoundError(course_id)
    return course


def load_visible_course(
    course_repository: CourseRepositoryProtocol, caller: Caller, course_id: UUID | str | CourseId
) -> Course:
    course = load_course(course_repository, course_id)
    if not course.is_visible_to(caller):
        raise CourseNotFoundError(course_id)
    return course


def load_modifiable_course(
    course_repository: CourseRepositoryProtocol, caller: Caller, course_id: UUID | str | CourseId
) -> Course:
    """
    Raises:
        CourseNotFoundError: If the course does not exist or is deleted
        AuthorizationError: If the caller is neither an author nor an admin
    """
    course = load_course(course_repository, course_id)
    course.ensure_can_be_modified_by(caller)
    return course
