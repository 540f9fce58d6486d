"""
Use case for the course lifecycle.

Covers creation, updates, status changes, author management, deletion and
the association of guides with courses. Every operation that touches both a
course and its guides saves them in one transaction.
"""

from collections.abc import Iterable
from uuid import UUID

import structlog

from learnhub.application.common.parsing import parse_enum, parse_user_ids
from learnhub.application.common.unit_of_work import UnitOfWork
from learnhub.application.courses.protocols.course_repository import CourseRepositoryProtocol
from learnhub.application.courses.use_cases.course_access import load_modifiable_course
from learnhub.application.guides.protocols.guide_repository import GuideRepositoryProtocol
from learnhub.application.guides.use_cases.guide_access import load_guide, load_visible_guide
from learnhub.application.topics.use_cases.topic_use_case import TopicUseCase
from learnhub.domain.common.value_objects.ids import UserId
from learnhub.domain.courses.entities.course import Course, CourseStatus, DifficultyLevel
from learnhub.domain.courses.exceptions import GuideNotInCourseError
from learnhub.domain.guides.entities.guide import Guide
from learnhub.domain.identity.caller import Caller, Role

logger = structlog.get_logger(__name__)


class CourseManagementUseCase:
    """Use case for creating, updating and deleting courses and for guide association."""

    def __init__(
        self,
        course_repository: CourseRepositoryProtocol,
        guide_repository: GuideRepositoryProtocol,
        topic_use_case: TopicUseCase,
        uow: UnitOfWork,
        max_authors: int,
    ) -> None:
        self.course_repository = course_repository
        self.guide_repository = guide_repository
        self.topic_use_case = topic_use_case
        self.uow = uow
        self.max_authors = max_authors

    def create_course(
        self,
        caller: Caller,
        title: str,
        description: str | None = None,
        cover_image: str | None = None,
        difficulty_level: DifficultyLevel | str = DifficultyLevel.BEGINNER,
        author_ids: Iterable[UserId | str] = (),
        topic_ids: Iterable[UUID | str] = (),
    ) -> Course:
        """
        Create a DRAFT course. The caller is always one of its authors.

        Raises:
            AuthorizationError: If the caller is not a teacher or admin
            TopicNotFoundError: If any topic does not exist
            ValidationError: If the title is blank or there are too many authors
        """
        caller.require_any_role(Role.TEACHER, Role.ADMIN)
        authors = parse_user_ids(author_ids) | {caller.require_user()}
        level = parse_enum(DifficultyLevel, difficulty_level, "difficulty_level")

        with self.uow:
            topics = self.topic_use_case.resolve_topic_ids(topic_ids)
            course = Course.create(
                title=title,
                author_ids=authors,
                max_authors=self.max_authors,
                description=description,
                cover_image=cover_image,
                difficulty_level=level,
                topic_ids=topics,
            )
            course = self.course_repository.save(course)
            self.uow.commit()

        logger.info("created_course", course_id=str(course.id), author_count=len(authors))
        return course

    def update_course(
        self,
        caller: Caller,
        course_id: UUID | str,
        title: str | None = None,
        description: str | None = None,
        cover_image: str | None = None,
        difficulty_level: DifficultyLevel | str | None = None,
        topic_ids: Iterable[UUID | str] | None = None,
    ) -> Course:
        """Update course metadata; fields left as None are not changed."""
        level = (
            parse_enum(DifficultyLevel, difficulty_level, "difficulty_level")
            if difficulty_level is not None
            else None
        )

        with self.uow:
            course = load_modifiable_course(self.course_repository, caller, course_id)
            course.update_details(
                title=title,
                description=description,
                cover_image=cover_image,
                difficulty_level=level,
            )
            if topic_ids is not None:
                course.replace_topics(self.topic_use_case.resolve_topic_ids(topic_ids))
            course = self.course_repository.save(course)
            self.uow.commit()

        logger.info("updated_course", course_id=str(course.id))
        return course

    def update_status(
        self, caller: Caller, course_id: UUID | str, new_status: CourseStatus | str
    ) -> Course:
        status = parse_enum(CourseStatus, new_status, "status")

        with self.uow:
            course = load_modifiable_course(self.course_repository, caller, course_id)
            previous = course.status
            course.change_status(status)
            course = self.course_repository.save(course)
            self.uow.commit()

        logger.info(
            "updated_course_status",
            course_id=str(course.id),
            from_status=previous.value,
            to_status=course.status.value,
        )
        return course

    def update_authors(
        self, caller: Caller, course_id: UUID | str, author_ids: Iterable[UserId | str]
    ) -> Course:
        authors = parse_user_ids(author_ids)

        with self.uow:
            course = load_modifiable_course(self.course_repository, caller, course_id)
            course.update_authors(authors, self.max_authors)
            course = self.course_repository.save(course)
            self.uow.commit()

        logger.info("updated_course_authors", course_id=str(course.id), author_count=len(authors))
        return course

    def delete_course(self, caller: Caller, course_id: UUID | str) -> None:
        """
        Soft-delete a course.

        Its guides are disassociated first and revert to DRAFT.
        """
        with self.uow:
            course = load_modifiable_course(self.course_repository, caller, course_id)
            guides = {
                guide.id: guide for guide in self.guide_repository.find_by_ids(course.guide_ids)
            }

            for guide_id in list(course.guide_ids):
                course.remove_guide(guide_id)
                guide = guides.get(guide_id)
                if guide is not None and guide.course_id == course.id:
                    guide.disassociate_from_course()
                    self.guide_repository.save(guide)

            course.delete()
            self.course_repository.save(course)
            self.uow.commit()

        logger.info("deleted_course", course_id=str(course.id), released_guides=len(guides))

    def associate_guide(
        self, caller: Caller, course_id: UUID | str, guide_id: UUID | str
    ) -> tuple[Course, Guide]:
        """
        Append a guide to a course.

        Returns:
            The updated course and guide

        Raises:
            CourseNotFoundError: If the course does not exist
            GuideNotFoundError: If the guide does not exist or the caller cannot see it
            AuthorizationError: If the caller cannot modify the course
            BusinessRuleViolationError: If the guide already belongs to a course
        """
        with self.uow:
            course = load_modifiable_course(self.course_repository, caller, course_id)
            guide = load_visible_guide(self.guide_repository, caller, guide_id)

            guide.associate_with_course(course.id)
            course.add_guide(guide.id)

            guide = self.guide_repository.save(guide)
            course = self.course_repository.save(course)
            self.uow.commit()

        logger.info(
            "associated_guide_with_course",
            course_id=str(course.id),
            guide_id=str(guide.id),
            position=course.guide_count,
        )
        return course, guide

    def disassociate_guide(
        self, caller: Caller, course_id: UUID | str, guide_id: UUID | str
    ) -> tuple[Course, Guide]:
        """
        Remove a guide from a course; the guide reverts to DRAFT.

        Raises:
            GuideNotInCourseError: If the guide is not part of this course
        """
        with self.uow:
            course = load_modifiable_course(self.course_repository, caller, course_id)
            guide = load_guide(self.guide_repository, guide_id)

            if not course.contains_guide(guide.id) or guide.course_id != course.id:
                raise GuideNotInCourseError(guide.id, course.id)
            course.remove_guide(guide.id)
            guide.disassociate_from_course()

            guide = self.guide_repository.save(guide)
            course = self.course_repository.save(course)
            self.uow.commit()

        logger.info(
            "disassociated_guide_from_course", course_id=str(course.id), guide_id=str(guide.id)
        )
        return course, guide
