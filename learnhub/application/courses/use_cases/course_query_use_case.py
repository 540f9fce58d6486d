"""Read-side use case for courses."""

from collections.abc import Iterable
from uuid import UUID

from learnhub.application.common.pagination import PaginatedResult, Pagination
from learnhub.application.common.parsing import parse_enum, parse_user_ids
from learnhub.application.courses.protocols.course_repository import (
    CourseRepositoryProtocol,
    CourseSearchCriteria,
)
from learnhub.application.courses.use_cases.course_access import load_visible_course
from learnhub.application.guides.protocols.guide_repository import GuideRepositoryProtocol
from learnhub.domain.common.value_objects.ids import TopicId, UserId
from learnhub.domain.courses.entities.course import Course, CourseStatus
from learnhub.domain.courses.services.course_details_aggregator import (
    CourseDetails,
    aggregate_course_details,
)
from learnhub.domain.identity.caller import Caller


class CourseQueryUseCase:
    """Queries never reveal courses the caller is not allowed to see."""

    def __init__(
        self,
        course_repository: CourseRepositoryProtocol,
        guide_repository: GuideRepositoryProtocol,
    ) -> None:
        self.course_repository = course_repository
        self.guide_repository = guide_repository

    def get_course(self, caller: Caller, course_id: UUID | str) -> Course:
        """
        Raises:
            CourseNotFoundError: If the course is missing, deleted or not visible
        """
        return load_visible_course(self.course_repository, caller, course_id)

    def get_course_details(self, caller: Caller, course_id: UUID | str) -> CourseDetails:
        """
        Get a course with its guides in course order and the total page count.

        Guides of a visible course are shown whatever their own status, since
        associated guides are published through their course.
        """
        course = load_visible_course(self.course_repository, caller, course_id)
        guides = self.guide_repository.find_by_ids(course.guide_ids)
        return aggregate_course_details(course, guides)

    def search_courses(
        self,
        caller: Caller,
        title: str | None = None,
        topic_ids: Iterable[UUID | str] = (),
        author_ids: Iterable[UserId | str] = (),
        status: CourseStatus | str | None = None,
        pagination: Pagination | None = None,
    ) -> PaginatedResult[Course]:
        """
        Search courses visible to the caller.

        Raises:
            AuthenticationRequiredError: If an anonymous caller filters by a
                non-published status
        """
        status_vo = parse_enum(CourseStatus, status, "status") if status is not None else None
        if status_vo is not None and status_vo != CourseStatus.PUBLISHED:
            caller.require_authentication()

        pagination = pagination or Pagination()
        criteria = CourseSearchCriteria(
            title=title.strip() if title and title.strip() else None,
            topic_ids=frozenset(TopicId.parse(topic_id) for topic_id in topic_ids),
            author_ids=frozenset(parse_user_ids(author_ids)),
            status=status_vo,
            viewer_id=caller.current_user_id(),
            viewer_is_admin=caller.is_admin(),
        )
        items, total = self.course_repository.search(criteria, pagination)
        return PaginatedResult(items=items, total=total, pagination=pagination)
