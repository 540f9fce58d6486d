"""
Course aggregate root.

A course is an ordered collection of guides. Guides are referenced by id;
the guide side carries the back-reference (Guide.course_id).
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum

from learnhub.domain.common.aggregate_root import AggregateRoot
from learnhub.domain.common.authorship import check_length, clean_title, validate_author_ids
from learnhub.domain.common.exceptions import (
    AuthorizationError,
    BusinessRuleViolationError,
    InvariantViolationError,
)
from learnhub.domain.common.value_objects.ids import CourseId, GuideId, TopicId, UserId
from learnhub.domain.courses.exceptions import (
    GuideNotInCourseError,
    InvalidCourseStatusTransitionError,
)
from learnhub.domain.identity.caller import Caller

MAX_COURSE_DESCRIPTION_LENGTH = 2000


class CourseStatus(str, Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"


class DifficultyLevel(str, Enum):
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"


COURSE_STATUS_TRANSITIONS: dict[CourseStatus, frozenset[CourseStatus]] = {
    CourseStatus.DRAFT: frozenset({CourseStatus.DRAFT, CourseStatus.PUBLISHED}),
    CourseStatus.PUBLISHED: frozenset({CourseStatus.PUBLISHED, CourseStatus.DRAFT}),
}


@dataclass(eq=False)
class Course(AggregateRoot[CourseId]):
    """
    Course aggregate root.

    Business Rules:
    - A course has between 1 and the configured maximum number of authors
    - Title is non-empty
    - guide_ids is ordered and holds each guide at most once
    - Deletion is a tombstone and requires the course to hold no guides
    """

    # Identity
    id: CourseId

    # Content
    title: str
    description: str | None
    cover_image: str | None
    status: CourseStatus
    author_ids: set[UserId]
    difficulty_level: DifficultyLevel = DifficultyLevel.BEGINNER
    topic_ids: set[TopicId] = field(default_factory=set)
    guide_ids: list[GuideId] = field(default_factory=list)
    likes_count: int = 0

    # Timestamps
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.title = clean_title(self.title)
        check_length(self.description, MAX_COURSE_DESCRIPTION_LENGTH, "description")
        self.author_ids = validate_author_ids(self.author_ids)
        if len(set(self.guide_ids)) != len(self.guide_ids):
            raise InvariantViolationError("Course", "a guide can appear only once")
        if self.likes_count < 0:
            raise InvariantViolationError("Course", "likes_count cannot be negative")

    # Query methods
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def is_published(self) -> bool:
        return self.status == CourseStatus.PUBLISHED

    def is_author(self, user_id: UserId | None) -> bool:
        return user_id is not None and user_id in self.author_ids

    def can_be_modified_by(self, caller: Caller) -> bool:
        return caller.is_authenticated() and (
            caller.is_admin() or self.is_author(caller.current_user_id())
        )

    def is_visible_to(self, caller: Caller) -> bool:
        if self.is_deleted():
            return False
        return self.is_published() or self.can_be_modified_by(caller)

    def ensure_can_be_modified_by(self, caller: Caller) -> None:
        caller.require_authentication()
        if not self.can_be_modified_by(caller):
            raise AuthorizationError("Only authors or admins can modify this course")

    def contains_guide(self, guide_id: GuideId) -> bool:
        return guide_id in self.guide_ids

    @property
    def guide_count(self) -> int:
        return len(self.guide_ids)

    # Command methods
    def update_details(
        self,
        title: str | None = None,
        description: str | None = None,
        cover_image: str | None = None,
        difficulty_level: DifficultyLevel | None = None,
    ) -> None:
        """Update the fields that were given; None leaves a field untouched."""
        if title is not None:
            self.title = clean_title(title)
        if description is not None:
            check_length(description, MAX_COURSE_DESCRIPTION_LENGTH, "description")
            self.description = description
        if cover_image is not None:
            self.cover_image = cover_image
        if difficulty_level is not None:
            self.difficulty_level = difficulty_level
        self._touch()

    def replace_topics(self, topic_ids: Iterable[TopicId]) -> None:
        self.topic_ids = set(topic_ids)
        self._touch()

    def change_status(self, new_status: CourseStatus) -> None:
        if new_status not in COURSE_STATUS_TRANSITIONS[self.status]:
            raise InvalidCourseStatusTransitionError(self.status.value, new_status.value)
        if new_status == self.status:
            return
        self.status = new_status
        self._touch()

    def update_authors(self, author_ids: Iterable[UserId], max_authors: int) -> None:
        self.author_ids = validate_author_ids(author_ids, max_authors)
        self._touch()

    def add_guide(self, guide_id: GuideId) -> None:
        """Append a guide to the end of the course."""
        if self.contains_guide(guide_id):
            raise BusinessRuleViolationError(
                "guide_single_course", f"Guide {guide_id} is already part of this course"
            )
        self.guide_ids.append(guide_id)
        self._touch()

    def remove_guide(self, guide_id: GuideId) -> None:
        if not self.contains_guide(guide_id):
            raise GuideNotInCourseError(guide_id, self.id)
        self.guide_ids.remove(guide_id)
        self._touch()

    def delete(self) -> None:
        """
        Tombstone the course.

        Raises:
            BusinessRuleViolationError: If guides are still linked to the course
        """
        if self.guide_ids:
            raise BusinessRuleViolationError(
                "course_has_guides", "Remove all guides from the course before deleting it"
            )
        self.deleted_at = datetime.now(UTC)
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    # Factory methods
    @classmethod
    def create(
        cls,
        title: str,
        author_ids: Iterable[UserId],
        max_authors: int,
        description: str | None = None,
        cover_image: str | None = None,
        difficulty_level: DifficultyLevel = DifficultyLevel.BEGINNER,
        topic_ids: Iterable[TopicId] = (),
    ) -> "Course":
        """Factory for creating a new DRAFT course without guides."""
        now = datetime.now(UTC)
        return cls(
            id=CourseId.generate(),
            title=title,
            description=description,
            cover_image=cover_image,
            status=CourseStatus.DRAFT,
            author_ids=validate_author_ids(author_ids, max_authors),
            difficulty_level=difficulty_level,
            topic_ids=set(topic_ids),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: CourseId,
        title: str,
        description: str | None,
        cover_image: str | None,
        status: CourseStatus,
        author_ids: Iterable[UserId],
        difficulty_level: DifficultyLevel,
        topic_ids: Iterable[TopicId],
        guide_ids: Iterable[GuideId],
        likes_count: int,
        created_at: datetime,
        updated_at: datetime,
        deleted_at: datetime | None = None,
    ) -> "Course":
        """Factory for reconstituting a course from persistence."""
        return cls(
            id=id,
            title=title,
            description=description,
            cover_image=cover_image,
            status=status,
            author_ids=set(author_ids),
            difficulty_level=difficulty_level,
            topic_ids=set(topic_ids),
            guide_ids=list(guide_ids),
            likes_count=likes_count,
            created_at=created_at,
            updated_at=updated_at,
            deleted_at=deleted_at,
        )
