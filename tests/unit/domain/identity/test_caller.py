import pytest

from learnhub.domain.common.exceptions import (
    AuthenticationRequiredError,
    AuthorizationError,
    ValidationError,
)
from learnhub.domain.common.value_objects.ids import UserId
from learnhub.domain.identity.caller import Caller, Role


class TestCaller:
    def test_anonymous_caller(self) -> None:
        caller = Caller.anonymous()

        assert not caller.is_authenticated()
        assert caller.current_user_id() is None
        assert not caller.is_admin()

    def test_anonymous_caller_cannot_hold_roles(self) -> None:
        with pytest.raises(ValidationError):
            Caller(user_id=None, roles=frozenset({Role.ADMIN}))

    def test_authenticated_wraps_plain_strings(self) -> None:
        caller = Caller.authenticated("teacher-1", Role.TEACHER)

        assert caller.current_user_id() == UserId("teacher-1")
        assert caller.has_role(Role.TEACHER)
        assert not caller.has_role(Role.ADMIN)

    def test_require_user_for_anonymous_raises_authentication_required(self) -> None:
        with pytest.raises(AuthenticationRequiredError):
            Caller.anonymous().require_user()

    def test_require_any_role(self) -> None:
        teacher = Caller.authenticated("teacher-1", Role.TEACHER)
        student = Caller.authenticated("student-1", Role.STUDENT)

        teacher.require_any_role(Role.TEACHER, Role.ADMIN)
        with pytest.raises(AuthorizationError) as exc_info:
            student.require_any_role(Role.TEACHER, Role.ADMIN)
        assert not isinstance(exc_info.value, AuthenticationRequiredError)

    def test_require_role_for_anonymous_raises_authentication_required(self) -> None:
        with pytest.raises(AuthenticationRequiredError):
            Caller.anonymous().require_role(Role.STUDENT)

    def test_self_or_admin(self) -> None:
        student = Caller.authenticated("student-1", Role.STUDENT)
        admin = Caller.authenticated("admin-1", Role.ADMIN)

        assert student.is_self_or_admin(UserId("student-1"))
        assert not student.is_self_or_admin(UserId("student-2"))
        assert admin.is_self_or_admin(UserId("student-2"))

        with pytest.raises(AuthorizationError):
            student.require_self_or_admin(UserId("student-2"))
        with pytest.raises(AuthenticationRequiredError):
            Caller.anonymous().require_self_or_admin(UserId("student-1"))
