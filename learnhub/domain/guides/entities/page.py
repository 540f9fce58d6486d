"""Page entity, a single ordered unit of guide content."""

from dataclasses import dataclass
from datetime import UTC, datetime

from learnhub.domain.common.entity import Entity
from learnhub.domain.common.exceptions import ValidationError
from learnhub.domain.common.value_objects.ids import GuideId, PageId


def _check_content(content: str | None) -> str:
    if content is None or not content.strip():
        raise ValidationError("Page content cannot be empty", field="content")
    return content


def _check_order_number(order_number: int) -> int:
    if isinstance(order_number, bool) or not isinstance(order_number, int) or order_number < 1:
        raise ValidationError(
            "Page order number must be a positive integer",
            field="order_number",
            value=order_number,
        )
    return order_number


@dataclass(eq=False)
class Page(Entity[PageId]):
    """
    Page owned by a Guide.

    Business Rules:
    - Content cannot be empty
    - Order number is a 1-based positive integer
    - Order numbers are unique within a guide (enforced by the Guide aggregate)
    """

    id: PageId
    guide_id: GuideId
    content: str
    order_number: int
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        _check_content(self.content)
        _check_order_number(self.order_number)

    def update_content(self, content: str) -> None:
        self.content = _check_content(content)
        self.updated_at = datetime.now(UTC)

    def move_to(self, order_number: int) -> None:
        self.order_number = _check_order_number(order_number)
        self.updated_at = datetime.now(UTC)

    @classmethod
    def create(cls, guide_id: GuideId, content: str, order_number: int) -> "Page":
        """Factory for creating a new page."""
        now = datetime.now(UTC)
        return cls(
            id=PageId.generate(),
            guide_id=guide_id,
            content=content,
            order_number=order_number,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: PageId,
        guide_id: GuideId,
        content: str,
        order_number: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Page":
        """Factory for reconstituting a page from persistence."""
        return cls(
            id=id,
            guide_id=guide_id,
            content=content,
            order_number=order_number,
            created_at=created_at,
            updated_at=updated_at,
        )
