from .learning_progress_repository import LearningProgressRepository

__all__ = ["LearningProgressRepository"]
