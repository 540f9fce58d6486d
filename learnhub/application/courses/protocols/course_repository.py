"""Protocol for Course repository."""

from dataclasses import dataclass, field
from typing import Protocol

from learnhub.application.common.pagination import Pagination
from learnhub.domain.common.value_objects.ids import CourseId, TopicId, UserId
from learnhub.domain.courses.entities.course import Course, CourseStatus


@dataclass(frozen=True)
class CourseSearchCriteria:
    """Filters for course search, limited to what the viewer may see."""

    title: str | None = None
    topic_ids: frozenset[TopicId] = field(default_factory=frozenset)
    author_ids: frozenset[UserId] = field(default_factory=frozenset)
    status: CourseStatus | None = None
    viewer_id: UserId | None = None
    viewer_is_admin: bool = False


class CourseRepositoryProtocol(Protocol):
    """Protocol for Course repository operations. Deleted courses are never returned."""

    def find_by_id(self, course_id: CourseId) -> Course | None:
        """
        Find a course by ID.

        Returns:
            Course entity if found and not deleted, None otherwise
        """
        ...

    def save(self, course: Course) -> Course:
        """Save a course (create or update), including its ordered guide list."""
        ...

    def search(
        self, criteria: CourseSearchCriteria, pagination: Pagination
    ) -> tuple[list[Course], int]:
        """
        Search courses visible to the viewer described by the criteria.

        Returns:
            Tuple of (courses for the requested page, total number of matches)
        """
        ...
