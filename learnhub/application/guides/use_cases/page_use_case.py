"""Use case for managing the pages of a guide."""

from uuid import UUID

import structlog

from learnhub.application.common.unit_of_work import UnitOfWork
from learnhub.application.guides.protocols.guide_repository import GuideRepositoryProtocol
from learnhub.application.guides.use_cases.guide_access import load_modifiable_guide
from learnhub.domain.common.value_objects.ids import PageId
from learnhub.domain.guides.entities.page import Page
from learnhub.domain.identity.caller import Caller

logger = structlog.get_logger(__name__)


class PageUseCase:
    """
    Use case for page operations.

    Pages are reached through their guide, so every command checks that the
    caller may modify the guide.
    """

    def __init__(self, guide_repository: GuideRepositoryProtocol, uow: UnitOfWork) -> None:
        self.guide_repository = guide_repository
        self.uow = uow

    def create_page(
        self, caller: Caller, guide_id: UUID | str, content: str, order_number: int
    ) -> Page:
        """
        Add a page to a guide.

        Args:
            caller: Author or admin
            guide_id: ID of the guide
            content: Page content
            order_number: 1-based position, unique within the guide

        Returns:
            The created page

        Raises:
            GuideNotFoundError: If the guide does not exist
            AuthorizationError: If the caller cannot modify the guide
            DuplicatePageOrderError: If the order number is already used
        """
        with self.uow:
            guide = load_modifiable_guide(self.guide_repository, caller, guide_id)
            page = guide.add_page(content, order_number)
            self.guide_repository.save(guide)
            self.uow.commit()

        logger.info(
            "created_page",
            guide_id=str(guide.id),
            page_id=str(page.id),
            order_number=page.order_number,
            pages_count=guide.pages_count,
        )
        return page

    def update_page(
        self,
        caller: Caller,
        guide_id: UUID | str,
        page_id: UUID | str,
        content: str | None = None,
        order_number: int | None = None,
    ) -> Page:
        """
        Update page content and/or move it to another order number.

        Raises:
            PageNotFoundError: If the page does not belong to the guide
            DuplicatePageOrderError: If the target order number is used by another page
        """
        page_id_vo = PageId.parse(page_id)

        with self.uow:
            guide = load_modifiable_guide(self.guide_repository, caller, guide_id)
            page = guide.update_page(page_id_vo, content=content, order_number=order_number)
            self.guide_repository.save(guide)
            self.uow.commit()

        logger.info("updated_page", guide_id=str(guide.id), page_id=str(page.id))
        return page

    def delete_page(self, caller: Caller, guide_id: UUID | str, page_id: UUID | str) -> None:
        """Remove a page. Other pages keep their order numbers, leaving a gap."""
        page_id_vo = PageId.parse(page_id)

        with self.uow:
            guide = load_modifiable_guide(self.guide_repository, caller, guide_id)
            guide.remove_page(page_id_vo)
            self.guide_repository.save(guide)
            self.uow.commit()

        logger.info(
            "deleted_page",
            guide_id=str(guide.id),
            page_id=str(page_id_vo),
            pages_count=guide.pages_count,
        )
