"""
Learning progress entity.

Tracks how far one user got through one guide or course. The status only
moves forward: NOT_STARTED -> IN_PROGRESS -> COMPLETED.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from uuid import UUID

from learnhub.domain.common.aggregate_root import AggregateRoot
from learnhub.domain.common.exceptions import InvariantViolationError, ValidationError
from learnhub.domain.common.value_objects.ids import LearningProgressId, UserId


class ProgressStatus(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class LearningEntityType(str, Enum):
    GUIDE = "GUIDE"
    COURSE = "COURSE"


def calculate_percentage(completed_items: int, total_items: int) -> int:
    """Whole-number percentage, rounded down; 0 when there is nothing to complete."""
    if total_items <= 0:
        return 0
    return completed_items * 100 // total_items


@dataclass(eq=False)
class LearningProgress(AggregateRoot[LearningProgressId]):
    """
    Per-user progress through a guide or course.

    Business Rules:
    - 0 <= completed_items <= total_items
    - progress_percentage is derived from completed/total items
    - Reading time only accumulates
    - COMPLETED is terminal
    """

    id: LearningProgressId
    user_id: UserId
    entity_type: LearningEntityType
    entity_id: UUID
    status: ProgressStatus
    total_items: int
    completed_items: int = 0
    progress_percentage: int = 0
    total_reading_time_seconds: int = 0
    started_at: datetime | None = None
    completed_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.total_items < 0:
            raise InvariantViolationError("LearningProgress", "total_items cannot be negative")
        if not 0 <= self.completed_items <= self.total_items:
            raise InvariantViolationError(
                "LearningProgress", "completed_items must be between 0 and total_items"
            )
        if self.total_reading_time_seconds < 0:
            raise InvariantViolationError(
                "LearningProgress", "total_reading_time_seconds cannot be negative"
            )

    def is_completed(self) -> bool:
        return self.status == ProgressStatus.COMPLETED

    def is_owned_by(self, user_id: UserId | None) -> bool:
        return user_id is not None and self.user_id == user_id

    def start(self) -> None:
        """Move NOT_STARTED to IN_PROGRESS; later states are left unchanged."""
        if self.status != ProgressStatus.NOT_STARTED:
            return
        now = datetime.now(UTC)
        self.status = ProgressStatus.IN_PROGRESS
        self.started_at = now
        self.updated_at = now

    def update(self, completed_items: int, reading_time_seconds: int) -> None:
        """
        Record progress.

        Args:
            completed_items: Absolute number of finished items
            reading_time_seconds: Reading time to add to the running total

        Raises:
            ValidationError: If completed_items is outside 0..total_items or the
                reading time is negative
        """
        if not 0 <= completed_items <= self.total_items:
            raise ValidationError(
                f"Completed items must be between 0 and {self.total_items}",
                field="completed_items",
                value=completed_items,
            )
        if reading_time_seconds < 0:
            raise ValidationError(
                "Reading time cannot be negative",
                field="reading_time_seconds",
                value=reading_time_seconds,
            )

        self.total_reading_time_seconds += reading_time_seconds
        self.updated_at = datetime.now(UTC)
        if self.is_completed():
            return

        self.start()
        self.completed_items = completed_items
        self.progress_percentage = calculate_percentage(completed_items, self.total_items)
        if completed_items >= self.total_items:
            self.complete()

    def complete(self) -> None:
        """Force completion: all items done, 100 percent."""
        if self.is_completed():
            return
        now = datetime.now(UTC)
        if self.started_at is None:
            self.started_at = now
        self.status = ProgressStatus.COMPLETED
        self.completed_items = self.total_items
        self.progress_percentage = 100
        self.completed_at = now
        self.updated_at = now

    @classmethod
    def create(
        cls,
        user_id: UserId,
        entity_type: LearningEntityType,
        entity_id: UUID,
        total_items: int,
    ) -> "LearningProgress":
        """Factory for a NOT_STARTED record."""
        return cls(
            id=LearningProgressId.generate(),
            user_id=user_id,
            entity_type=entity_type,
            entity_id=entity_id,
            status=ProgressStatus.NOT_STARTED,
            total_items=total_items,
            updated_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: LearningProgressId,
        user_id: UserId,
        entity_type: LearningEntityType,
        entity_id: UUID,
        status: ProgressStatus,
        total_items: int,
        completed_items: int,
        progress_percentage: int,
        total_reading_time_seconds: int,
        started_at: datetime | None,
        completed_at: datetime | None,
        updated_at: datetime | None,
    ) -> "LearningProgress":
        """Factory for reconstituting progress from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            entity_type=entity_type,
            entity_id=entity_id,
            status=status,
            total_items=total_items,
            completed_items=completed_items,
            progress_percentage=progress_percentage,
            total_reading_time_seconds=total_reading_time_seconds,
            started_at=started_at,
            completed_at=completed_at,
            updated_at=updated_at,
        )
