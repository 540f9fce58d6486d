"""Tests for course enrollment."""

from uuid import uuid4

import pytest

from learnhub.core import Container
from learnhub.domain.common.exceptions import (
    AuthenticationRequiredError,
    AuthorizationError,
    BusinessRuleViolationError,
)
from learnhub.domain.courses.entities.course import Course
from learnhub.domain.courses.exceptions import CourseNotFoundError
from learnhub.domain.enrollments.entities.enrollment import EnrollmentStatus
from learnhub.domain.enrollments.exceptions import (
    DuplicateEnrollmentError,
    EnrollmentNotFoundError,
)
from learnhub.domain.identity.caller import Caller


@pytest.fixture
def published_course(container: Container, teacher: Caller) -> Course:
    courses = container.course_management_use_case()
    course = courses.create_course(teacher, title="Python Track")
    return courses.update_status(teacher, course.id.value, "PUBLISHED")


class TestEnroll:
    def test_enroll_self(
        self, container: Container, student: Caller, published_course: Course
    ) -> None:
        enrollments = container.enrollment_use_case()

        enrollment = enrollments.enroll(student, "student-1", published_course.id.value)

        assert enrollment.status == EnrollmentStatus.ACTIVE
        assert enrollments.is_enrolled(student, "student-1", published_course.id.value)

    def test_cannot_enroll_someone_else(
        self, container: Container, student: Caller, published_course: Course
    ) -> None:
        with pytest.raises(AuthorizationError):
            container.enrollment_use_case().enroll(
                student, "student-2", published_course.id.value
            )

    def test_admin_can_enroll_anyone(
        self, container: Container, admin: Caller, published_course: Course
    ) -> None:
        enrollment = container.enrollment_use_case().enroll(
            admin, "student-2", published_course.id.value
        )

        assert str(enrollment.user_id) == "student-2"

    def test_anonymous_cannot_enroll(
        self, container: Container, anonymous: Caller, published_course: Course
    ) -> None:
        with pytest.raises(AuthenticationRequiredError):
            container.enrollment_use_case().enroll(
                anonymous, "student-1", published_course.id.value
            )

    def test_draft_course_is_not_found_for_students(
        self, container: Container, teacher: Caller, student: Caller
    ) -> None:
        course = container.course_management_use_case().create_course(teacher, title="Draft")

        with pytest.raises(CourseNotFoundError):
            container.enrollment_use_case().enroll(student, "student-1", course.id.value)

    def test_draft_course_cannot_be_enrolled(self, container: Container, teacher: Caller) -> None:
        course = container.course_management_use_case().create_course(teacher, title="Draft")

        with pytest.raises(BusinessRuleViolationError):
            container.enrollment_use_case().enroll(teacher, "teacher-1", course.id.value)

    def test_missing_course(self, container: Container, student: Caller) -> None:
        with pytest.raises(CourseNotFoundError):
            container.enrollment_use_case().enroll(student, "student-1", uuid4())

    def test_duplicate_active_enrollment_conflicts(
        self, container: Container, student: Caller, published_course: Course
    ) -> None:
        enrollments = container.enrollment_use_case()
        enrollments.enroll(student, "student-1", published_course.id.value)

        with pytest.raises(DuplicateEnrollmentError):
            enrollments.enroll(student, "student-1", published_course.id.value)


class TestCancel:
    def test_cancel_is_idempotent(
        self, container: Container, student: Caller, published_course: Course
    ) -> None:
        enrollments = container.enrollment_use_case()
        enrollment = enrollments.enroll(student, "student-1", published_course.id.value)

        first = enrollments.cancel(student, enrollment.id.value)
        second = enrollments.cancel(student, enrollment.id.value)

        assert first.status == EnrollmentStatus.CANCELLED
        assert second.status == EnrollmentStatus.CANCELLED
        assert second.cancelled_at == first.cancelled_at
        assert not enrollments.is_enrolled(student, "student-1", published_course.id.value)

    def test_reenroll_reactivates_the_same_enrollment(
        self, container: Container, student: Caller, published_course: Course
    ) -> None:
        enrollments = container.enrollment_use_case()
        enrollment = enrollments.enroll(student, "student-1", published_course.id.value)
        enrollments.cancel(student, enrollment.id.value)

        reactivated = enrollments.enroll(student, "student-1", published_course.id.value)

        assert reactivated.id == enrollment.id
        assert reactivated.status == EnrollmentStatus.ACTIVE
        assert reactivated.cancelled_at is None
        assert len(enrollments.get_user_enrollments(student, "student-1")) == 1

    def test_only_owner_or_admin_cancels(
        self,
        container: Container,
        student: Caller,
        admin: Caller,
        published_course: Course,
    ) -> None:
        enrollments = container.enrollment_use_case()
        enrollment = enrollments.enroll(student, "student-1", published_course.id.value)
        intruder = Caller.authenticated("student-2")

        with pytest.raises(AuthorizationError):
            enrollments.cancel(intruder, enrollment.id.value)
        assert enrollments.cancel(admin, enrollment.id.value).status == EnrollmentStatus.CANCELLED

    def test_cancel_missing_enrollment(self, container: Container, student: Caller) -> None:
        with pytest.raises(EnrollmentNotFoundError):
            container.enrollment_use_case().cancel(student, uuid4())


class TestEnrollmentQueries:
    def test_get_enrollment(
        self, container: Container, student: Caller, published_course: Course
    ) -> None:
        enrollments = container.enrollment_use_case()
        enrollment = enrollments.enroll(student, "student-1", published_course.id.value)

        found = enrollments.get_enrollment(student, "student-1", published_course.id.value)

        assert found.id == enrollment.id
        with pytest.raises(EnrollmentNotFoundError):
            enrollments.get_enrollment(student, "student-1", uuid4())

    def test_users_cannot_read_other_users_enrollments(
        self, container: Container, student: Caller
    ) -> None:
        with pytest.raises(AuthorizationError):
            container.enrollment_use_case().get_user_enrollments(student, "student-2")

    def test_course_enrollments_for_authors_and_admins(
        self,
        container: Container,
        teacher: Caller,
        student: Caller,
        admin: Caller,
        anonymous: Caller,
        published_course: Course,
    ) -> None:
        enrollments = container.enrollment_use_case()
        enrollments.enroll(student, "student-1", published_course.id.value)
        course_id = published_course.id.value

        assert len(enrollments.get_course_enrollments(teacher, course_id)) == 1
        assert len(enrollments.get_course_enrollments(admin, course_id)) == 1
        with pytest.raises(AuthorizationError):
            enrollments.get_course_enrollments(student, course_id)
        with pytest.raises(AuthenticationRequiredError):
            enrollments.get_course_enrollments(anonymous, course_id)
        with pytest.raises(CourseNotFoundError):
            enrollments.get_course_enrollments(teacher, uuid4())
