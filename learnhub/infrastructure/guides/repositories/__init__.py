from .guide_like_repository import GuideLikeRepository
from .guide_repository import GuideRepository

__all__ = ["GuideLikeRepository", "GuideRepository"]
