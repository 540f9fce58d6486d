"""
Application exception hierarchy and transport status mapping.

Domain errors carry no transport knowledge; this module decides which status
each of them maps to and which message is safe to expose.
"""

from http import HTTPStatus

import structlog

from learnhub.domain.common.exceptions import (
    AuthenticationRequiredError,
    AuthorizationError,
    BusinessRuleViolationError,
    ConflictError,
    DomainError,
    EntityNotFoundError,
    InvariantViolationError,
    ValidationError,
)

logger = structlog.get_logger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


class LearnhubError(Exception):
    """Base exception for errors raised outside the domain layer."""

    def __init__(self, message: str, status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ServiceError(LearnhubError):
    """Infrastructure or service failure; its message is never exposed."""


# Ordered from most to least specific; the first match wins.
_STATUS_BY_ERROR: list[tuple[type[DomainError], HTTPStatus]] = [
    (EntityNotFoundError, HTTPStatus.NOT_FOUND),
    (AuthenticationRequiredError, HTTPStatus.UNAUTHORIZED),
    (AuthorizationError, HTTPStatus.FORBIDDEN),
    (ConflictError, HTTPStatus.CONFLICT),
    (BusinessRuleViolationError, HTTPStatus.CONFLICT),
    (ValidationError, HTTPStatus.BAD_REQUEST),
    (InvariantViolationError, HTTPStatus.BAD_REQUEST),
]


def status_code_for(exc: BaseException) -> int:
    """Map an exception to the HTTP status the transport layer should return."""
    if isinstance(exc, LearnhubError):
        return int(exc.status_code)
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return int(status)
    if isinstance(exc, DomainError):
        return int(HTTPStatus.BAD_REQUEST)
    return int(HTTPStatus.INTERNAL_SERVER_ERROR)


def public_message_for(exc: BaseException) -> str:
    """
    Return the message that may be shown to the client.

    Domain errors describe the caller's own request and are returned as is.
    Anything else is logged and replaced by a generic message.
    """
    if isinstance(exc, DomainError):
        return exc.message
    logger.error("unhandled_error", error_type=type(exc).__name__, exc_info=exc)
    return GENERIC_ERROR_MESSAGE
