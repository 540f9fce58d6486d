"""Guides module domain exceptions."""

from learnhub.domain.common.exceptions import (
    BusinessRuleViolationError,
    ConflictError,
    EntityNotFoundError,
)


class GuideNotFoundError(EntityNotFoundError):
    """Raised when a guide does not exist, is deleted or is not visible."""

    def __init__(self, guide_id: object) -> None:
        super().__init__("Guide", guide_id)


class PageNotFoundError(EntityNotFoundError):
    """Raised when a page does not exist within the requested guide."""

    def __init__(self, page_id: object) -> None:
        super().__init__("Page", page_id)


class ChallengeNotFoundError(EntityNotFoundError):
    """Raised when removing a challenge that is not related to the guide."""

    def __init__(self, challenge_id: object) -> None:
        super().__init__("Challenge", challenge_id)


class DuplicatePageOrderError(ConflictError):
    """Raised when a page order number is already used within the guide."""

    def __init__(self, order_number: int) -> None:
        super().__init__(
            f"Page with order number {order_number} already exists in this guide",
            {"order_number": order_number},
        )
        self.order_number = order_number


class GuideAlreadyLikedError(ConflictError):
    def __init__(self, guide_id: object) -> None:
        super().__init__(f"Guide {guide_id} is already liked", {"guide_id": str(guide_id)})


class GuideNotLikedError(ConflictError):
    def __init__(self, guide_id: object) -> None:
        super().__init__(f"Guide {guide_id} is not liked", {"guide_id": str(guide_id)})


class InvalidGuideStatusTransitionError(BusinessRuleViolationError):
    """Raised when a status change is not in the guide transition table."""

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(
            "guide_status_transition",
            f"Cannot change guide status from {current} to {requested}",
        )
        self.current = current
        self.requested = requested
