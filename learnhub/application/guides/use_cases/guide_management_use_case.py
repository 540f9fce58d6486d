"""
Use case for the guide lifecycle.

Covers creation, metadata updates, status changes, author management and
deletion of guides.
"""

from collections.abc import Iterable
from uuid import UUID

import structlog

from learnhub.application.common.parsing import parse_enum, parse_user_ids
from learnhub.application.common.unit_of_work import UnitOfWork
from learnhub.application.courses.protocols.course_repository import CourseRepositoryProtocol
from learnhub.application.guides.protocols.guide_repository import GuideRepositoryProtocol
from learnhub.application.guides.use_cases.guide_access import load_modifiable_guide
from learnhub.application.topics.use_cases.topic_use_case import TopicUseCase
from learnhub.domain.common.value_objects.ids import UserId
from learnhub.domain.guides.entities.guide import Guide, GuideStatus
from learnhub.domain.identity.caller import Caller, Role

logger = structlog.get_logger(__name__)


class GuideManagementUseCase:
    """Use case for creating, updating and deleting guides."""

    def __init__(
        self,
        guide_repository: GuideRepositoryProtocol,
        course_repository: CourseRepositoryProtocol,
        topic_use_case: TopicUseCase,
        uow: UnitOfWork,
        max_authors: int,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            guide_repository: Guide repository protocol implementation
            course_repository: Course repository, used when a deleted guide leaves its course
            topic_use_case: Resolves topic ids
            uow: Unit of work wrapping each command
            max_authors: Upper bound on the number of authors per guide
        """
        self.guide_repository = guide_repository
        self.course_repository = course_repository
        self.topic_use_case = topic_use_case
        self.uow = uow
        self.max_authors = max_authors

    def create_guide(
        self,
        caller: Caller,
        title: str,
        description: str | None = None,
        cover_image: str | None = None,
        author_ids: Iterable[UserId | str] | None = None,
        topic_ids: Iterable[UUID | str] = (),
    ) -> Guide:
        """
        Create a DRAFT guide.

        Args:
            caller: Teacher or admin creating the guide
            title: Guide title
            description: Optional description
            cover_image: Optional cover image reference
            author_ids: Authors; defaults to the caller alone
            topic_ids: Topics to tag the guide with

        Returns:
            The created guide

        Raises:
            AuthorizationError: If the caller is not a teacher or admin
            TopicNotFoundError: If any topic does not exist
            ValidationError: If the title is blank or there are too many authors
        """
        caller.require_any_role(Role.TEACHER, Role.ADMIN)
        authors = parse_user_ids(author_ids) if author_ids is not None else {caller.require_user()}

        with self.uow:
            topics = self.topic_use_case.resolve_topic_ids(topic_ids)
            guide = Guide.create(
                title=title,
                author_ids=authors,
                max_authors=self.max_authors,
                description=description,
                cover_image=cover_image,
                topic_ids=topics,
            )
            guide = self.guide_repository.save(guide)
            self.uow.commit()

        logger.info(
            "created_guide",
            guide_id=str(guide.id),
            author_count=len(guide.author_ids),
            topic_count=len(guide.topic_ids),
        )
        return guide

    def update_guide(
        self,
        caller: Caller,
        guide_id: UUID | str,
        title: str | None = None,
        description: str | None = None,
        cover_image: str | None = None,
        topic_ids: Iterable[UUID | str] | None = None,
    ) -> Guide:
        """
        Update guide metadata; fields left as None are not changed.

        Raises:
            GuideNotFoundError: If the guide does not exist or is deleted
            AuthorizationError: If the caller is neither an author nor an admin
            TopicNotFoundError: If any new topic does not exist
        """
        with self.uow:
            guide = load_modifiable_guide(self.guide_repository, caller, guide_id)
            guide.update_details(title=title, description=description, cover_image=cover_image)
            if topic_ids is not None:
                guide.replace_topics(self.topic_use_case.resolve_topic_ids(topic_ids))
            guide = self.guide_repository.save(guide)
            self.uow.commit()

        logger.info("updated_guide", guide_id=str(guide.id))
        return guide

    def update_status(
        self, caller: Caller, guide_id: UUID | str, new_status: GuideStatus | str
    ) -> Guide:
        """
        Change a guide's status following the guide transition table.

        Raises:
            InvalidGuideStatusTransitionError: For ASSOCIATED_WITH_COURSE requests
                or any change of an associated guide
        """
        status = parse_enum(GuideStatus, new_status, "status")

        with self.uow:
            guide = load_modifiable_guide(self.guide_repository, caller, guide_id)
            previous = guide.status
            guide.change_status(status)
            guide = self.guide_repository.save(guide)
            self.uow.commit()

        logger.info(
            "updated_guide_status",
            guide_id=str(guide.id),
            from_status=previous.value,
            to_status=guide.status.value,
        )
        return guide

    def update_authors(
        self, caller: Caller, guide_id: UUID | str, author_ids: Iterable[UserId | str]
    ) -> Guide:
        """Replace the author set of a guide."""
        authors = parse_user_ids(author_ids)

        with self.uow:
            guide = load_modifiable_guide(self.guide_repository, caller, guide_id)
            guide.update_authors(authors, self.max_authors)
            guide = self.guide_repository.save(guide)
            self.uow.commit()

        logger.info("updated_guide_authors", guide_id=str(guide.id), author_count=len(authors))
        return guide

    def delete_guide(self, caller: Caller, guide_id: UUID | str) -> None:
        """
        Soft-delete a guide.

        A guide that belongs to a course is removed from that course first,
        in the same transaction.
        """
        with self.uow:
            guide = load_modifiable_guide(self.guide_repository, caller, guide_id)

            if guide.course_id is not None:
                course = self.course_repository.find_by_id(guide.course_id)
                if course is not None and course.contains_guide(guide.id):
                    course.remove_guide(guide.id)
                    self.course_repository.save(course)
                guide.disassociate_from_course()

            guide.delete()
            self.guide_repository.save(guide)
            self.uow.commit()

        logger.info("deleted_guide", guide_id=str(guide.id))
