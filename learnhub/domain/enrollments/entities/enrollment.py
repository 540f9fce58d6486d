"""Enrollment entity linking a user to a course."""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

from learnhub.domain.common.aggregate_root import AggregateRoot
from learnhub.domain.common.exceptions import InvariantViolationError
from learnhub.domain.common.value_objects.ids import CourseId, EnrollmentId, UserId
from learnhub.domain.enrollments.exceptions import DuplicateEnrollmentError


class EnrollmentStatus(str, Enum):
    ACTIVE = "ACTIVE"
    CANCELLED = "CANCELLED"


@dataclass(eq=False)
class Enrollment(AggregateRoot[EnrollmentId]):
    """
    Enrollment of a user in a course.

    Business Rules:
    - One enrollment per (user, course); a cancelled one is reactivated
      instead of creating a second row
    - cancelled_at is set exactly when the status is CANCELLED
    """

    id: EnrollmentId
    user_id: UserId
    course_id: CourseId
    status: EnrollmentStatus
    enrolled_at: datetime
    cancelled_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if (self.status == EnrollmentStatus.CANCELLED) != (self.cancelled_at is not None):
            raise InvariantViolationError(
                "Enrollment", "cancelled_at must be set exactly for cancelled enrollments"
            )

    def is_active(self) -> bool:
        return self.status == EnrollmentStatus.ACTIVE

    def cancel(self) -> None:
        """Cancel the enrollment. Cancelling twice leaves the first cancellation intact."""
        if not self.is_active():
            return
        self.status = EnrollmentStatus.CANCELLED
        self.cancelled_at = datetime.now(UTC)

    def reactivate(self) -> None:
        """
        Turn a cancelled enrollment back into an active one.

        Raises:
            DuplicateEnrollmentError: If the enrollment is already active
        """
        if self.is_active():
            raise DuplicateEnrollmentError(self.user_id, self.course_id)
        self.status = EnrollmentStatus.ACTIVE
        self.enrolled_at = datetime.now(UTC)
        self.cancelled_at = None

    @classmethod
    def create(cls, user_id: UserId, course_id: CourseId) -> "Enrollment":
        return cls(
            id=EnrollmentId.generate(),
            user_id=user_id,
            course_id=course_id,
            status=EnrollmentStatus.ACTIVE,
            enrolled_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: EnrollmentId,
        user_id: UserId,
        course_id: CourseId,
        status: EnrollmentStatus,
        enrolled_at: datetime,
        cancelled_at: datetime | None = None,
    ) -> "Enrollment":
        """Factory for reconstituting an enrollment from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            course_id=course_id,
            status=status,
            enrolled_at=enrolled_at,
            cancelled_at=cancelled_at,
        )
