"""Tests for mapping errors to transport status codes and messages."""

import pytest

from learnhub.domain.common.exceptions import (
    AuthenticationRequiredError,
    AuthorizationError,
    BusinessRuleViolationError,
    ConflictError,
    DomainError,
    InvariantViolationError,
    ValidationError,
)
from learnhub.domain.enrollments.exceptions import DuplicateEnrollmentError
from learnhub.domain.guides.exceptions import GuideNotFoundError
from learnhub.exceptions import (
    GENERIC_ERROR_MESSAGE,
    ServiceError,
    public_message_for,
    status_code_for,
)


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (GuideNotFoundError("g-1"), 404),
        (AuthenticationRequiredError(), 401),
        (AuthorizationError(), 403),
        (ConflictError("taken"), 409),
        (DuplicateEnrollmentError("u", "c"), 409),
        (BusinessRuleViolationError("rule"), 409),
        (ValidationError("bad"), 400),
        (InvariantViolationError("Guide", "broken"), 400),
        (DomainError("other"), 400),
        (ServiceError("db down"), 500),
        (RuntimeError("boom"), 500),
    ],
)
def test_status_code_for(error: BaseException, status_code: int) -> None:
    assert status_code_for(error) == status_code


def test_public_message_for_domain_error() -> None:
    assert public_message_for(ValidationError("Title cannot be empty")) == "Title cannot be empty"


def test_public_message_hides_unexpected_errors() -> None:
    assert public_message_for(RuntimeError("password=hunter2")) == GENERIC_ERROR_MESSAGE
    assert public_message_for(ServiceError("connection refused")) == GENERIC_ERROR_MESSAGE
