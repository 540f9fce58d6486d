"""Learning progress domain exceptions."""

from learnhub.domain.common.exceptions import ConflictError, EntityNotFoundError


class LearningProgressNotFoundError(EntityNotFoundError):
    def __init__(self, progress_id: object) -> None:
        super().__init__("LearningProgress", progress_id)


class ProgressAlreadyStartedError(ConflictError):
    """Raised when a progress record already exists for (user, entity_type, entity_id)."""

    def __init__(self, user_id: object, entity_type: str, entity_id: object) -> None:
        super().__init__(
            f"Progress for {entity_type} {entity_id} already exists for user {user_id}",
            {"user_id": str(user_id), "entity_type": entity_type, "entity_id": str(entity_id)},
        )
