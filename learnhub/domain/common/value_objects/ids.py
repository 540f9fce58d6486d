from dataclasses import dataclass

from ..entity import EntityId
from ..exceptions import ValidationError
from ..value_object import ValueObject


@dataclass(frozen=True)
class UserId(ValueObject):
    """
    Opaque user identifier issued by the identity provider.

    Users are not managed here, so this is a plain string rather than a UUID.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("User id cannot be empty", field="user_id", value=self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TopicId(EntityId):
    """Strongly-typed topic identifier."""


@dataclass(frozen=True)
class GuideId(EntityId):
    """Strongly-typed guide identifier."""


@dataclass(frozen=True)
class PageId(EntityId):
    """Strongly-typed page identifier."""


@dataclass(frozen=True)
class GuideLikeId(EntityId):
    """Strongly-typed guide like identifier."""


@dataclass(frozen=True)
class ChallengeId(EntityId):
    """Identifier of a challenge owned by the external challenge service."""


@dataclass(frozen=True)
class CourseId(EntityId):
    """Strongly-typed course identifier."""


@dataclass(frozen=True)
class EnrollmentId(EntityId):
    """Strongly-typed enrollment identifier."""


@dataclass(frozen=True)
class LearningProgressId(EntityId):
    """Strongly-typed learning progress identifier."""
