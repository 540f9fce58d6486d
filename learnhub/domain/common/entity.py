"""
Base class for Entities.

Entities have an identity that runs through time. Two entities are equal when
their ids are equal, whatever their other attributes hold.

Example:
    @dataclass
    class Page(Entity[PageId]):
        id: PageId
        guide_id: GuideId
        content: str
        order_number: int
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

from .exceptions import ValidationError
from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity ids wrap a UUID generated in the domain when the entity is created,
    so aggregates have their identity before they are persisted.

    Example:
        @dataclass(frozen=True)
        class GuideId(EntityId):
            pass

        guide_id = GuideId.generate()
        course_id = CourseId(guide_id.value)
        # Different types, so guide_id != course_id
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise TypeError(f"{self.__class__.__name__} must wrap a UUID")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Create a new random identifier."""
        return cls(uuid4())

    @classmethod
    def parse(cls, raw: "UUID | str | EntityId") -> Self:
        """Build an identifier from a UUID, its string form or another id."""
        if isinstance(raw, EntityId):
            return cls(raw.value)
        if isinstance(raw, UUID):
            return cls(raw)
        try:
            return cls(UUID(str(raw)))
        except ValueError as e:
            raise ValidationError(
                f"Invalid {cls.__name__}", field=cls.__name__, value=str(raw)
            ) from e

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
