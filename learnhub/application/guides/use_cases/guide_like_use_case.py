"""Use case for liking and unliking guides."""

from collections.abc import Iterable
from uuid import UUID

import structlog

from learnhub.application.common.unit_of_work import UnitOfWork
from learnhub.application.guides.protocols.guide_like_repository import (
    GuideLikeRepositoryProtocol,
)
from learnhub.application.guides.protocols.guide_repository import GuideRepositoryProtocol
from learnhub.application.guides.use_cases.guide_access import load_visible_guide
from learnhub.domain.common.value_objects.ids import GuideId
from learnhub.domain.guides.entities.guide import Guide
from learnhub.domain.guides.entities.guide_like import GuideLike
from learnhub.domain.guides.exceptions import GuideAlreadyLikedError, GuideNotLikedError
from learnhub.domain.identity.caller import Caller

logger = structlog.get_logger(__name__)


class GuideLikeUseCase:
    """Likes are stored as GuideLike rows; the guide's likes_count changes in the same commit."""

    def __init__(
        self,
        guide_repository: GuideRepositoryProtocol,
        guide_like_repository: GuideLikeRepositoryProtocol,
        uow: UnitOfWork,
    ) -> None:
        self.guide_repository = guide_repository
        self.guide_like_repository = guide_like_repository
        self.uow = uow

    def like_guide(self, caller: Caller, guide_id: UUID | str) -> Guide:
        """
        Like a guide.

        Raises:
            AuthenticationRequiredError: If the caller is anonymous
            GuideNotFoundError: If the guide is missing or not visible
            GuideAlreadyLikedError: If the caller already likes the guide
        """
        user_id = caller.require_user()

        with self.uow:
            guide = load_visible_guide(self.guide_repository, caller, guide_id)
            if self.guide_like_repository.exists(guide.id, user_id):
                raise GuideAlreadyLikedError(guide.id)
            self.guide_like_repository.save(GuideLike.create(guide.id, user_id))
            guide.increment_likes()
            guide = self.guide_repository.save(guide)
            self.uow.commit()

        logger.info("liked_guide", guide_id=str(guide.id), likes_count=guide.likes_count)
        return guide

    def unlike_guide(self, caller: Caller, guide_id: UUID | str) -> Guide:
        """
        Remove the caller's like.

        Raises:
            GuideNotLikedError: If the caller does not like the guide
        """
        user_id = caller.require_user()

        with self.uow:
            guide = load_visible_guide(self.guide_repository, caller, guide_id)
            like = self.guide_like_repository.find(guide.id, user_id)
            if like is None:
                raise GuideNotLikedError(guide.id)
            self.guide_like_repository.delete(like)
            guide.decrement_likes()
            guide = self.guide_repository.save(guide)
            self.uow.commit()

        logger.info("unliked_guide", guide_id=str(guide.id), likes_count=guide.likes_count)
        return guide

    def has_liked(self, caller: Caller, guide_id: UUID | str) -> bool:
        user_id = caller.current_user_id()
        if user_id is None:
            return False
        return self.guide_like_repository.exists(GuideId.parse(guide_id), user_id)

    def liked_guide_ids(self, caller: Caller, guide_ids: Iterable[UUID | str]) -> set[GuideId]:
        """Return which of the given guides the caller likes; anonymous callers like none."""
        user_id = caller.current_user_id()
        ids = [GuideId.parse(guide_id) for guide_id in guide_ids]
        if user_id is None or not ids:
            return set()
        return self.guide_like_repository.find_liked_guide_ids(user_id, ids)
