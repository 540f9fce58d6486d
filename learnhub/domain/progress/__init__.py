"""Learning progress module domain layer."""

from learnhub.domain.progress.entities import (
    LearningEntityType,
    LearningProgress,
    ProgressStatus,
)
from learnhub.domain.progress.exceptions import (
    LearningProgressNotFoundError,
    ProgressAlreadyStartedError,
)

__all__ = [
    "LearningEntityType",
    "LearningProgress",
    "LearningProgressNotFoundError",
    "ProgressAlreadyStartedError",
    "ProgressStatus",
]
