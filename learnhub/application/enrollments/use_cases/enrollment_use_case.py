"""Use case for enrolling users in courses."""

from uuid import UUID

import structlog

from learnhub.application.common.parsing import parse_user_id
from learnhub.application.common.unit_of_work import UnitOfWork
from learnhub.application.courses.protocols.course_repository import CourseRepositoryProtocol
from learnhub.application.courses.use_cases.course_access import load_course, load_visible_course
from learnhub.application.enrollments.protocols.enrollment_repository import (
    EnrollmentRepositoryProtocol,
)
from learnhub.domain.common.exceptions import AuthorizationError, BusinessRuleViolationError
from learnhub.domain.common.value_objects.ids import CourseId, EnrollmentId, UserId
from learnhub.domain.enrollments.entities.enrollment import Enrollment
from learnhub.domain.enrollments.exceptions import (
    DuplicateEnrollmentError,
    EnrollmentNotFoundError,
)
from learnhub.domain.identity.caller import Caller

logger = structlog.get_logger(__name__)


class EnrollmentUseCase:
    """
    Use case for enrollments.

    A user has at most one enrollment row per course. Enrolling again after a
    cancellation reactivates that row.
    """

    def __init__(
        self,
        enrollment_repository: EnrollmentRepositoryProtocol,
        course_repository: CourseRepositoryProtocol,
        uow: UnitOfWork,
    ) -> None:
        self.enrollment_repository = enrollment_repository
        self.course_repository = course_repository
        self.uow = uow

    def enroll(self, caller: Caller, user_id: UserId | str, course_id: UUID | str) -> Enrollment:
        """
        Enroll a user in a published course.

        Args:
            caller: The user themself or an admin
            user_id: User to enroll
            course_id: Course to enroll in

        Returns:
            The active enrollment

        Raises:
            AuthorizationError: If the caller enrolls someone else without being admin
            CourseNotFoundError: If the course is missing or not visible to the caller
            BusinessRuleViolationError: If the course is not published
            DuplicateEnrollmentError: If an active enrollment already exists
        """
        user_id_vo = parse_user_id(user_id)
        caller.require_self_or_admin(user_id_vo)

        with self.uow:
            course = load_visible_course(self.course_repository, caller, course_id)
            if not course.is_published():
                raise BusinessRuleViolationError(
                    "course_not_published", f"Course {course.id} is not open for enrollment"
                )

            enrollment = self.enrollment_repository.find_by_user_and_course(user_id_vo, course.id)
            reactivated = enrollment is not None
            if enrollment is None:
                enrollment = Enrollment.create(user_id_vo, course.id)
            elif enrollment.is_active():
                raise DuplicateEnrollmentError(user_id_vo, course.id)
            else:
                enrollment.reactivate()

            enrollment = self.enrollment_repository.save(enrollment)
            self.uow.commit()

        logger.info(
            "enrolled_user",
            enrollment_id=str(enrollment.id),
            user_id=str(user_id_vo),
            course_id=str(course.id),
            reactivated=reactivated,
        )
        return enrollment

    def cancel(self, caller: Caller, enrollment_id: UUID | str) -> Enrollment:
        """
        Cancel an enrollment. Cancelling a cancelled enrollment succeeds without changes.

        Raises:
            EnrollmentNotFoundError: If the enrollment does not exist
            AuthorizationError: If the caller is neither the owner nor an admin
        """
        caller.require_authentication()
        enrollment_id_vo = EnrollmentId.parse(enrollment_id)

        with self.uow:
            enrollment = self.enrollment_repository.find_by_id(enrollment_id_vo)
            if enrollment is None:
                raise EnrollmentNotFoundError(enrollment_id)
            caller.require_self_or_admin(enrollment.user_id)

            if not enrollment.is_active():
                logger.debug("enrollment_already_cancelled", enrollment_id=str(enrollment.id))
                return enrollment

            enrollment.cancel()
            enrollment = self.enrollment_repository.save(enrollment)
            self.uow.commit()

        logger.info("cancelled_enrollment", enrollment_id=str(enrollment.id))
        return enrollment

    def get_user_enrollments(self, caller: Caller, user_id: UserId | str) -> list[Enrollment]:
        user_id_vo = parse_user_id(user_id)
        caller.require_self_or_admin(user_id_vo)
        return self.enrollment_repository.find_by_user(user_id_vo)

    def get_enrollment(
        self, caller: Caller, user_id: UserId | str, course_id: UUID | str
    ) -> Enrollment:
        """
        Raises:
            EnrollmentNotFoundError: If the user never enrolled in the course
        """
        user_id_vo = parse_user_id(user_id)
        caller.require_self_or_admin(user_id_vo)
        enrollment = self.enrollment_repository.find_by_user_and_course(
            user_id_vo, CourseId.parse(course_id)
        )
        if enrollment is None:
            raise EnrollmentNotFoundError(f"{user_id_vo}/{course_id}")
        return enrollment

    def get_course_enrollments(self, caller: Caller, course_id: UUID | str) -> list[Enrollment]:
        """
        List the enrollments of a course; restricted to course authors and admins.

        Raises:
            AuthenticationRequiredError: If the caller is anonymous
            CourseNotFoundError: If the course does not exist
            AuthorizationError: If the caller is neither a course author nor an admin
        """
        caller.require_authentication()
        course = load_course(self.course_repository, course_id)
        if not (caller.is_admin() or course.is_author(caller.current_user_id())):
            raise AuthorizationError("Only course authors or admins can list enrollments")
        return self.enrollment_repository.find_by_course(course.id)

    def is_enrolled(self, caller: Caller, user_id: UserId | str, course_id: UUID | str) -> bool:
        user_id_vo = parse_user_id(user_id)
        caller.require_self_or_admin(user_id_vo)
        enrollment = self.enrollment_repository.find_by_user_and_course(
            user_id_vo, CourseId.parse(course_id)
        )
        return enrollment is not None and enrollment.is_active()
