"""
Guide aggregate root.

A guide is a paginated learning document written by one or more teachers.
It owns its pages and keeps them sorted by order number.
"""

import bisect
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
from learnhub.domain.common.value_objects.ids import (
    ChallengeId,
    CourseId,
    GuideId,
    PageId,
    TopicId,
    UserId,
)
from learnhub.domain.guides.entities.page import Page
from learnhub.domain.guides.events import GuideChallengeAdded
from learnhub.domain.guides.exceptions import (
    ChallengeNotFoundError,
    DuplicatePageOrderError,
    InvalidGuideStatusTransitionError,
    PageNotFoundError,
)
from learnhub.domain.identity.caller import Caller

MAX_GUIDE_DESCRIPTION_LENGTH = 1000


class GuideStatus(str, Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ASSOCIATED_WITH_COURSE = "ASSOCIATED_WITH_COURSE"


# Transitions callers may request through update_status. ASSOCIATED_WITH_COURSE
# is only entered and left through course association.
GUIDE_STATUS_TRANSITIONS: dict[GuideStatus, frozenset[GuideStatus]] = {
    GuideStatus.DRAFT: frozenset({GuideStatus.DRAFT, GuideStatus.PUBLISHED}),
    GuideStatus.PUBLISHED: frozenset({GuideStatus.PUBLISHED, GuideStatus.DRAFT}),
    GuideStatus.ASSOCIATED_WITH_COURSE: frozenset(),
}


@dataclass(eq=False)
class Guide(AggregateRoot[GuideId]):
    """
    Guide aggregate root.

    Business Rules:
    - A guide has between 1 and the configured maximum number of authors
    - Title is non-empty; description is at most MAX_GUIDE_DESCRIPTION_LENGTH chars
    - Page order numbers are unique within the guide; pages stay sorted
    - Status is ASSOCIATED_WITH_COURSE exactly when course_id is set
    - Deletion is a tombstone (deleted_at), independent of status
    - likes_count never goes below zero
    """

    # Identity
    id: GuideId

    # Content
    title: str
    description: str | None
    cover_image: str | None
    status: GuideStatus
    author_ids: set[UserId]
    topic_ids: set[TopicId] = field(default_factory=set)
    pages: list[Page] = field(default_factory=list)
    likes_count: int = 0
    course_id: CourseId | None = None
    related_challenge_ids: set[ChallengeId] = field(default_factory=set)

    # Timestamps
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.title = clean_title(self.title)
        check_length(self.description, MAX_GUIDE_DESCRIPTION_LENGTH, "description")
        self.author_ids = validate_author_ids(self.author_ids)
        if self.likes_count < 0:
            raise InvariantViolationError("Guide", "likes_count cannot be negative")
        if (self.status == GuideStatus.ASSOCIATED_WITH_COURSE) != (self.course_id is not None):
            raise InvariantViolationError(
                "Guide", "status ASSOCIATED_WITH_COURSE requires a course and vice versa"
            )
        self.pages.sort(key=lambda page: page.order_number)

    # Query methods
    @property
    def pages_count(self) -> int:
        return len(self.pages)

    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def is_published(self) -> bool:
        return self.status == GuideStatus.PUBLISHED

    def is_author(self, user_id: UserId | None) -> bool:
        return user_id is not None and user_id in self.author_ids

    def can_be_modified_by(self, caller: Caller) -> bool:
        return caller.is_authenticated() and (
            caller.is_admin() or self.is_author(caller.current_user_id())
        )

    def is_visible_to(self, caller: Caller) -> bool:
        """Deleted guides are invisible; drafts are visible to authors and admins only."""
        if self.is_deleted():
            return False
        if self.is_published():
            return True
        return self.can_be_modified_by(caller)

    def ensure_can_be_modified_by(self, caller: Caller) -> None:
        """
        Raises:
            AuthenticationRequiredError: If the caller is anonymous
            AuthorizationError: If the caller is neither an author nor an admin
        """
        caller.require_authentication()
        if not self.can_be_modified_by(caller):
            raise AuthorizationError("Only authors or admins can modify this guide")

    def get_page(self, page_id: PageId) -> Page:
        for page in self.pages:
            if page.id == page_id:
                return page
        raise PageNotFoundError(page_id)

    def has_page_with_order(self, order_number: int, exclude: PageId | None = None) -> bool:
        return any(
            page.order_number == order_number and page.id != exclude for page in self.pages
        )

    # Command methods
    def update_details(
        self,
        title: str | None = None,
        description: str | None = None,
        cover_image: str | None = None,
    ) -> None:
        """Update the fields that were given; None leaves a field untouched."""
        if title is not None:
            self.title = clean_title(title)
        if description is not None:
            check_length(description, MAX_GUIDE_DESCRIPTION_LENGTH, "description")
            self.description = description
        if cover_image is not None:
            self.cover_image = cover_image
        self._touch()

    def replace_topics(self, topic_ids: Iterable[TopicId]) -> None:
        self.topic_ids = set(topic_ids)
        self._touch()

    def change_status(self, new_status: GuideStatus) -> None:
        """
        Apply a caller-requested status change.

        Raises:
            InvalidGuideStatusTransitionError: If the change is not allowed
        """
        if new_status not in GUIDE_STATUS_TRANSITIONS[self.status]:
            raise InvalidGuideStatusTransitionError(self.status.value, new_status.value)
        if new_status == self.status:
            return
        self.status = new_status
        self._touch()

    def update_authors(self, author_ids: Iterable[UserId], max_authors: int) -> None:
        self.author_ids = validate_author_ids(author_ids, max_authors)
        self._touch()

    def associate_with_course(self, course_id: CourseId) -> None:
        """
        Link this guide to a course.

        Raises:
            BusinessRuleViolationError: If the guide already belongs to a course
        """
        if self.course_id is not None:
            raise BusinessRuleViolationError(
                "guide_single_course",
                f"Guide {self.id} is already associated with course {self.course_id}",
            )
        self.course_id = course_id
        self.status = GuideStatus.ASSOCIATED_WITH_COURSE
        self._touch()

    def disassociate_from_course(self) -> None:
        """Unlink the guide from its course; it reverts to DRAFT and must be re-published."""
        if self.course_id is None:
            raise BusinessRuleViolationError(
                "guide_not_associated", f"Guide {self.id} is not associated with a course"
            )
        self.course_id = None
        self.status = GuideStatus.DRAFT
        self._touch()

    def add_page(self, content: str, order_number: int) -> Page:
        """
        Add a page at the given order number.

        Raises:
            ValidationError: If content is blank or order_number < 1
            DuplicatePageOrderError: If the order number is taken
        """
        page = Page.create(self.id, content, order_number)
        if self.has_page_with_order(page.order_number):
            raise DuplicatePageOrderError(page.order_number)
        bisect.insort(self.pages, page, key=lambda p: p.order_number)
        self._touch()
        return page

    def update_page(
        self, page_id: PageId, content: str | None = None, order_number: int | None = None
    ) -> Page:
        page = self.get_page(page_id)
        moving = order_number is not None and order_number != page.order_number
        if moving and self.has_page_with_order(order_number, exclude=page.id):
            raise DuplicatePageOrderError(order_number)
        if moving:
            page.move_to(order_number)
            self.pages.sort(key=lambda p: p.order_number)
        if content is not None:
            page.update_content(content)
        self._touch()
        return page

    def remove_page(self, page_id: PageId) -> Page:
        """Remove a page; the remaining pages keep their order numbers."""
        page = self.get_page(page_id)
        self.pages.remove(page)
        self._touch()
        return page

    def increment_likes(self) -> None:
        self.likes_count += 1

    def decrement_likes(self) -> None:
        self.likes_count = max(0, self.likes_count - 1)

    def add_challenge(self, challenge_id: ChallengeId) -> None:
        if challenge_id in self.related_challenge_ids:
            raise BusinessRuleViolationError(
                "challenge_already_related",
                f"Challenge {challenge_id} is already related to guide {self.id}",
            )
        self.related_challenge_ids.add(challenge_id)
        self._touch()
        self._record_event(GuideChallengeAdded(guide_id=self.id, challenge_id=challenge_id))

    def remove_challenge(self, challenge_id: ChallengeId) -> None:
        if challenge_id not in self.related_challenge_ids:
            raise ChallengeNotFoundError(challenge_id)
        self.related_challenge_ids.remove(challenge_id)
        self._touch()

    def delete(self) -> None:
        """
        Tombstone the guide.

        Raises:
            BusinessRuleViolationError: If the guide is still linked to a course
        """
        if self.course_id is not None:
            raise BusinessRuleViolationError(
                "guide_in_course", "Remove the guide from its course before deleting it"
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
        topic_ids: Iterable[TopicId] = (),
    ) -> "Guide":
        """Factory for creating a new DRAFT guide with no pages and no likes."""
        now = datetime.now(UTC)
        return cls(
            id=GuideId.generate(),
            title=title,
            description=description,
            cover_image=cover_image,
            status=GuideStatus.DRAFT,
            author_ids=validate_author_ids(author_ids, max_authors),
            topic_ids=set(topic_ids),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: GuideId,
        title: str,
        description: str | None,
        cover_image: str | None,
        status: GuideStatus,
        author_ids: Iterable[UserId],
        topic_ids: Iterable[TopicId],
        pages: list[Page],
        likes_count: int,
        course_id: CourseId | None,
        related_challenge_ids: Iterable[ChallengeId],
        created_at: datetime,
        updated_at: datetime,
        deleted_at: datetime | None = None,
    ) -> "Guide":
        """Factory for reconstituting a guide from persistence."""
        return cls(
            id=id,
            title=title,
            description=description,
            cover_image=cover_image,
            status=status,
            author_ids=set(author_ids),
            topic_ids=set(topic_ids),
            pages=list(pages),
            likes_count=likes_count,
            course_id=course_id,
            related_challenge_ids=set(related_challenge_ids),
            created_at=created_at,
            updated_at=updated_at,
            deleted_at=deleted_at,
        )
