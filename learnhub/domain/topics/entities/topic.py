"""Topic entity for tagging guides and courses."""

from dataclasses import dataclass
from datetime import UTC, datetime

from learnhub.domain.common.entity import Entity
from learnhub.domain.common.exceptions import ValidationError
from learnhub.domain.common.value_objects.ids import TopicId

# Domain constraints
MAX_TOPIC_NAME_LENGTH = 100
MAX_TOPIC_DESCRIPTION_LENGTH = 500


def _clean_name(name: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Topic name cannot be empty", field="name", value=name)
    if len(cleaned) > MAX_TOPIC_NAME_LENGTH:
        raise ValidationError(
            f"Topic name cannot exceed {MAX_TOPIC_NAME_LENGTH} characters", field="name"
        )
    return cleaned


def _check_description(description: str | None) -> None:
    if description is not None and len(description) > MAX_TOPIC_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Topic description cannot exceed {MAX_TOPIC_DESCRIPTION_LENGTH} characters",
            field="description",
        )


@dataclass(eq=False)
class Topic(Entity[TopicId]):
    """
    Topic entity used as a tag on guides and courses.

    Business Rules:
    - Name is trimmed, non-empty and at most MAX_TOPIC_NAME_LENGTH chars
    - Name is unique across topics (enforced at repository level)
    """

    # Identity
    id: TopicId

    # Content
    name: str
    description: str | None

    # Timestamps
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        _clean_name(self.name)
        _check_description(self.description)

    def rename(self, name: str) -> None:
        self.name = _clean_name(name)
        self.updated_at = datetime.now(UTC)

    def update_description(self, description: str | None) -> None:
        _check_description(description)
        self.description = description
        self.updated_at = datetime.now(UTC)

    # Factory methods
    @classmethod
    def create(cls, name: str, description: str | None = None) -> "Topic":
        """Factory for creating a new topic."""
        now = datetime.now(UTC)
        return cls(
            id=TopicId.generate(),
            name=_clean_name(name),
            description=description,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: TopicId,
        name: str,
        description: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Topic":
        """Factory for reconstituting a topic from persistence."""
        return cls(
            id=id,
            name=name,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
        )
