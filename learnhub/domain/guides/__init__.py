"""
Guides bounded context - Domain layer.

Aggregates:
- Guide: paginated learning document that owns its Pages

Entities:
- Page: ordered content unit of a guide
- GuideLike: one user's like of a guide
"""

from learnhub.domain.guides.entities import Guide, GuideLike, GuideStatus, Page
from learnhub.domain.guides.events import GuideChallengeAdded
from learnhub.domain.guides.exceptions import (
    ChallengeNotFoundError,
    DuplicatePageOrderError,
    GuideAlreadyLikedError,
    GuideNotFoundError,
    GuideNotLikedError,
    InvalidGuideStatusTransitionError,
    PageNotFoundError,
)

__all__ = [
    "ChallengeNotFoundError",
    "DuplicatePageOrderError",
    "Guide",
    "GuideAlreadyLikedError",
    "GuideChallengeAdded",
    "GuideLike",
    "GuideNotFoundError",
    "GuideNotLikedError",
    "GuideStatus",
    "InvalidGuideStatusTransitionError",
    "Page",
    "PageNotFoundError",
]
