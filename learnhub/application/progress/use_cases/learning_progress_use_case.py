"""
Use case for tracking learning progress.

A progress record belongs to exactly one user; only that user may start or
advance it. Admins may read any record.
"""

from uuid import UUID

import structlog

from learnhub.application.common.parsing import parse_enum, parse_user_id
from learnhub.application.common.unit_of_work import UnitOfWork
from learnhub.application.courses.protocols.course_repository import CourseRepositoryProtocol
from learnhub.application.courses.use_cases.course_access import load_visible_course
from learnhub.application.guides.protocols.guide_repository import GuideRepositoryProtocol
from learnhub.application.guides.use_cases.guide_access import load_guide
from learnhub.application.progress.protocols.learning_progress_repository import (
    LearningProgressRepositoryProtocol,
)
from learnhub.domain.common.exceptions import AuthorizationError
from learnhub.domain.common.value_objects.ids import (
    CourseId,
    GuideId,
    LearningProgressId,
    UserId,
)
from learnhub.domain.courses.exceptions import CourseNotFoundError
from learnhub.domain.guides.entities.guide import Guide
from learnhub.domain.guides.exceptions import GuideNotFoundError
from learnhub.domain.identity.caller import Caller
from learnhub.domain.progress.entities.learning_progress import (
    LearningEntityType,
    LearningProgress,
)
from learnhub.domain.progress.exceptions import (
    LearningProgressNotFoundError,
    ProgressAlreadyStartedError,
)

logger = structlog.get_logger(__name__)


class LearningProgressUseCase:
    """Use case for the learning progress state machine."""

    def __init__(
        self,
        progress_repository: LearningProgressRepositoryProtocol,
        guide_repository: GuideRepositoryProtocol,
        course_repository: CourseRepositoryProtocol,
        uow: UnitOfWork,
    ) -> None:
        self.progress_repository = progress_repository
        self.guide_repository = guide_repository
        self.course_repository = course_repository
        self.uow = uow

    def start_learning(
        self,
        caller: Caller,
        user_id: UserId | str,
        entity_type: LearningEntityType | str,
        entity_id: UUID | str,
    ) -> LearningProgress:
        """
        Start tracking progress through a guide or course.

        Args:
            caller: Must be the learner; admins cannot start on behalf of others
            user_id: The learner
            entity_type: GUIDE or COURSE
            entity_id: ID of the guide or course

        Returns:
            The IN_PROGRESS record; total_items is the guide's page count or
            the course's guide count

        Raises:
            AuthorizationError: If the caller is not the learner
            GuideNotFoundError / CourseNotFoundError: If the target is missing,
                deleted or not visible
            ProgressAlreadyStartedError: If a record already exists
        """
        learner = self._require_learner(caller, user_id)
        target_type = parse_enum(LearningEntityType, entity_type, "entity_type")

        with self.uow:
            if target_type == LearningEntityType.GUIDE:
                guide = self._load_learnable_guide(caller, entity_id)
                target_id, total_items = guide.id.value, guide.pages_count
            else:
                course = load_visible_course(self.course_repository, caller, entity_id)
                target_id, total_items = course.id.value, course.guide_count

            existing = self.progress_repository.find_by_user_and_entity(
                learner, target_type, target_id
            )
            if existing is not None:
                raise ProgressAlreadyStartedError(learner, target_type.value, target_id)

            progress = LearningProgress.create(learner, target_type, target_id, total_items)
            progress.start()
            progress = self.progress_repository.save(progress)
            self.uow.commit()

        logger.info(
            "started_learning",
            progress_id=str(progress.id),
            user_id=str(learner),
            entity_type=target_type.value,
            entity_id=str(target_id),
            total_items=total_items,
        )
        return progress

    def update_progress(
        self,
        caller: Caller,
        progress_id: UUID | str,
        completed_items: int,
        reading_time_seconds: int = 0,
    ) -> LearningProgress:
        """
        Record the number of completed items and add reading time.

        Raises:
            LearningProgressNotFoundError: If the record does not exist
            AuthorizationError: If the caller does not own the record
            ValidationError: If completed_items is out of range or reading time is negative
        """
        with self.uow:
            progress = self._load_owned_progress(caller, progress_id)
            progress.update(completed_items, reading_time_seconds)
            progress = self.progress_repository.save(progress)
            self.uow.commit()

        logger.info(
            "updated_learning_progress",
            progress_id=str(progress.id),
            completed_items=progress.completed_items,
            progress_percentage=progress.progress_percentage,
            status=progress.status.value,
        )
        return progress

    def complete(self, caller: Caller, progress_id: UUID | str) -> LearningProgress:
        """Mark a record COMPLETED at 100 percent."""
        with self.uow:
            progress = self._load_owned_progress(caller, progress_id)
            progress.complete()
            progress = self.progress_repository.save(progress)
            self.uow.commit()

        logger.info("completed_learning", progress_id=str(progress.id))
        return progress

    def get_progress(self, caller: Caller, progress_id: UUID | str) -> LearningProgress:
        """
        Raises:
            LearningProgressNotFoundError: If the record does not exist
            AuthorizationError: If the caller is neither the owner nor an admin
        """
        progress = self._load_progress(progress_id)
        caller.require_self_or_admin(progress.user_id)
        return progress

    def get_progress_for_entity(
        self,
        caller: Caller,
        user_id: UserId | str,
        entity_type: LearningEntityType | str,
        entity_id: UUID | str,
    ) -> LearningProgress:
        user_id_vo = parse_user_id(user_id)
        caller.require_self_or_admin(user_id_vo)
        target_type = parse_enum(LearningEntityType, entity_type, "entity_type")
        id_type = GuideId if target_type == LearningEntityType.GUIDE else CourseId
        target_id = id_type.parse(entity_id).value

        progress = self.progress_repository.find_by_user_and_entity(
            user_id_vo, target_type, target_id
        )
        if progress is None:
            raise LearningProgressNotFoundError(f"{user_id_vo}/{target_type.value}/{target_id}")
        return progress

    def get_user_progress(self, caller: Caller, user_id: UserId | str) -> list[LearningProgress]:
        user_id_vo = parse_user_id(user_id)
        caller.require_self_or_admin(user_id_vo)
        return self.progress_repository.find_by_user(user_id_vo)

    def _require_learner(self, caller: Caller, user_id: UserId | str) -> UserId:
        learner = parse_user_id(user_id)
        if caller.require_user() != learner:
            raise AuthorizationError("Progress can only be recorded by the learner")
        return learner

    def _load_learnable_guide(self, caller: Caller, guide_id: UUID | str) -> Guide:
        """A guide can be learned when it is visible itself or through its visible course."""
        guide = load_guide(self.guide_repository, guide_id)
        if guide.is_visible_to(caller):
            return guide
        if guide.course_id is not None:
            try:
                load_visible_course(self.course_repository, caller, guide.course_id)
            except CourseNotFoundError:
                raise GuideNotFoundError(guide_id) from None
            return guide
        raise GuideNotFoundError(guide_id)

    def _load_progress(self, progress_id: UUID | str) -> LearningProgress:
        progress = self.progress_repository.find_by_id(LearningProgressId.parse(progress_id))
        if progress is None:
            raise LearningProgressNotFoundError(progress_id)
        return progress

    def _load_owned_progress(self, caller: Caller, progress_id: UUID | str) -> LearningProgress:
        progress = self._load_progress(progress_id)
        if not progress.is_owned_by(caller.require_user()):
            raise AuthorizationError("Progress can only be recorded by the learner")
        return progress
