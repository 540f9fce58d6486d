"""Topic module domain exceptions."""

from collections.abc import Iterable

from learnhub.domain.common.exceptions import ConflictError, EntityNotFoundError


class TopicNotFoundError(EntityNotFoundError):
    """Raised when one or more topics cannot be found."""

    def __init__(self, topic_ids: object | Iterable[object]) -> None:
        if isinstance(topic_ids, (list, tuple, set, frozenset)):
            missing = ", ".join(sorted(str(topic_id) for topic_id in topic_ids))
            super().__init__("Topic", missing)
            self.missing_ids = list(topic_ids)
        else:
            super().__init__("Topic", topic_ids)
            self.missing_ids = [topic_ids]


class DuplicateTopicNameError(ConflictError):
    """Raised when a topic with the same name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Topic with name '{name}' already exists", {"name": name})
        self.name = name
