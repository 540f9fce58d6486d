"""Loading guides with the visibility and ownership checks every use case needs."""

from uuid import UUID

from learnhub.application.guides.protocols.guide_repository import GuideRepositoryProtocol
from learnhub.domain.common.value_objects.ids import GuideId
from learnhub.domain.guides.entities.guide import Guide
from learnhub.domain.guides.exceptions import GuideNotFoundError
from learnhub.domain.identity.caller import Caller


def load_guide(
    guide_repository: GuideRepositoryProtocol, guide_id: UUID | str | GuideId
) -> Guide:
    """Load a non-deleted guide or raise GuideNotFoundError."""
    guide = guide_repository.find_by_id(GuideId.parse(guide_id))
    if guide is None:
        raise GuideNotFoundError(guide_id)
    return guide


def load_visible_guide(
    guide_repository: GuideRepositoryProtocol, caller: Caller, guide_id: UUID | str | GuideId
) -> Guide:
    """Load a guide the caller may see; invisible guides look exactly like missing ones."""
    guide = load_guide(guide_repository, guide_id)
    if not guide.is_visible_to(caller):
        raise GuideNotFoundError(guide_id)
    return guide


def load_modifiable_guide(
    guide_repository: GuideRepositoryProtocol, caller: Caller, guide_id: UUID | str | GuideId
) -> Guide:
    """
    Load a guide the caller may modify.

    Raises:
        GuideNotFoundError: If the guide does not exist or is deleted
        AuthorizationError: If the caller is neither an author nor an admin
    """
    guide = load_guide(guide_repository, guide_id)
    guide.ensure_can_be_modified_by(caller)
    return guide
