from .learning_progress import (
    LearningEntityType,
    LearningProgress,
    ProgressStatus,
    calculate_percentage,
)

__all__ = [
    "LearningEntityType",
    "LearningProgress",
    "ProgressStatus",
    "calculate_percentage",
]
