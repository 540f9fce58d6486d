from .topic_repository import TopicRepository

__all__ = ["TopicRepository"]
