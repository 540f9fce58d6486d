"""Topics module domain layer."""

from learnhub.domain.topics.entities import Topic
from learnhub.domain.topics.exceptions import DuplicateTopicNameError, TopicNotFoundError

__all__ = [
    "DuplicateTopicNameError",
    "Topic",
    "TopicNotFoundError",
]
