"""Read-side use case for guides and their pages."""

from collections.abc import Iterable
from uuid import UUID

from learnhub.application.common.pagination import PaginatedResult, Pagination
from learnhub.application.common.parsing import parse_enum, parse_user_ids
from learnhub.application.guides.protocols.guide_repository import (
    GuideRepositoryProtocol,
    GuideSearchCriteria,
)
from learnhub.application.guides.use_cases.guide_access import load_visible_guide
from learnhub.domain.common.exceptions import ValidationError
from learnhub.domain.common.value_objects.ids import PageId, TopicId, UserId
from learnhub.domain.guides.entities.guide import Guide, GuideStatus
from learnhub.domain.guides.entities.page import Page
from learnhub.domain.identity.caller import Caller


class GuideQueryUseCase:
    """Queries never reveal guides the caller is not allowed to see."""

    def __init__(self, guide_repository: GuideRepositoryProtocol) -> None:
        self.guide_repository = guide_repository

    def get_guide(self, caller: Caller, guide_id: UUID | str) -> Guide:
        """
        Get a guide by id.

        Raises:
            GuideNotFoundError: If the guide is missing, deleted or not visible
        """
        return load_visible_guide(self.guide_repository, caller, guide_id)

    def list_pages(self, caller: Caller, guide_id: UUID | str) -> list[Page]:
        """Get the pages of a visible guide ordered by order number."""
        guide = load_visible_guide(self.guide_repository, caller, guide_id)
        return list(guide.pages)

    def get_page(self, caller: Caller, guide_id: UUID | str, page_id: UUID | str) -> Page:
        """
        Get one page of a visible guide.

        Raises:
            PageNotFoundError: If the page belongs to another guide or does not exist
        """
        guide = load_visible_guide(self.guide_repository, caller, guide_id)
        return guide.get_page(PageId.parse(page_id))

    def search_guides(
        self,
        caller: Caller,
        title: str | None = None,
        topic_ids: Iterable[UUID | str] = (),
        author_ids: Iterable[UserId | str] = (),
        min_likes: int | None = None,
        status: GuideStatus | str | None = None,
        pagination: Pagination | None = None,
    ) -> PaginatedResult[Guide]:
        """
        Search guides visible to the caller.

        Args:
            caller: Who is searching
            title: Case-insensitive title substring
            topic_ids: Guides tagged with any of these topics
            author_ids: Guides written by any of these users
            min_likes: Minimum likes count
            status: Status filter; anything but PUBLISHED needs an authenticated caller
            pagination: Page to return

        Raises:
            AuthenticationRequiredError: If an anonymous caller filters by a
                non-published status
        """
        status_vo = parse_enum(GuideStatus, status, "status") if status is not None else None
        if status_vo is not None and status_vo != GuideStatus.PUBLISHED:
            caller.require_authentication()
        if min_likes is not None and min_likes < 0:
            raise ValidationError("Minimum likes cannot be negative", field="min_likes")

        pagination = pagination or Pagination()
        criteria = GuideSearchCriteria(
            title=title.strip() if title and title.strip() else None,
            topic_ids=frozenset(TopicId.parse(topic_id) for topic_id in topic_ids),
            author_ids=frozenset(parse_user_ids(author_ids)),
            min_likes=min_likes,
            status=status_vo,
            viewer_id=caller.current_user_id(),
            viewer_is_admin=caller.is_admin(),
        )
        items, total = self.guide_repository.search(criteria, pagination)
        return PaginatedResult(items=items, total=total, pagination=pagination)

    def get_guides_by_teacher(
        self, teacher_id: UserId | str, pagination: Pagination | None = None
    ) -> PaginatedResult[Guide]:
        """Public portfolio: the PUBLISHED guides of one author."""
        pagination = pagination or Pagination()
        criteria = GuideSearchCriteria(
            author_ids=frozenset(parse_user_ids([teacher_id])),
            status=GuideStatus.PUBLISHED,
        )
        items, total = self.guide_repository.search(criteria, pagination)
        return PaginatedResult(items=items, total=total, pagination=pagination)
