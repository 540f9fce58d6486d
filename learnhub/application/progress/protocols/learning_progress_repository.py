"""Protocol for LearningProgress repository."""

from typing import Protocol
from uuid import UUID

from learnhub.domain.common.value_objects.ids import LearningProgressId, UserId
from learnhub.domain.progress.entities.learning_progress import (
    LearningEntityType,
    LearningProgress,
)


class LearningProgressRepositoryProtocol(Protocol):
    """Protocol for LearningProgress repository operations."""

    def find_by_id(self, progress_id: LearningProgressId) -> LearningProgress | None: ...

    def find_by_user_and_entity(
        self, user_id: UserId, entity_type: LearningEntityType, entity_id: UUID
    ) -> LearningProgress | None:
        """Find the progress record of a user for one guide or course."""
        ...

    def find_by_user(self, user_id: UserId) -> list[LearningProgress]:
        """Get all progress records of a user, most recently updated first."""
        ...

    def save(self, progress: LearningProgress) -> LearningProgress: ...
