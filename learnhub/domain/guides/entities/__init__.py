from .guide import GUIDE_STATUS_TRANSITIONS, Guide, GuideStatus
from .guide_like import GuideLike
from .page import Page

__all__ = [
    "GUIDE_STATUS_TRANSITIONS",
    "Guide",
    "GuideLike",
    "GuideStatus",
    "Page",
]
