"""
Domain layer exceptions.

These exceptions represent domain-level errors raised when business rules are
violated, invariants would break, a caller lacks permission or a referenced
entity does not exist. The transport layer maps them to responses with
``learnhub.exceptions.status_code_for``.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when input is malformed.

    Example: blank title, negative completed items, too many authors.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """
    Raised when an entity does not exist or is not visible to the caller.

    Read paths raise this for private entities too, so their existence is
    never revealed.
    """

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": str(entity_id)})
        self.entity_type = entity_type
        self.entity_id = entity_id


class BusinessRuleViolationError(DomainError):
    """
    Raised when a business rule is violated.

    Example: associating a guide that already belongs to another course.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, {"rule": rule})
        self.rule = rule


class ConflictError(DomainError):
    """
    Raised when an operation would break a uniqueness rule.

    Example: a second ACTIVE enrollment for the same user and course.
    """


class InvariantViolationError(DomainError):
    """
    Raised when an aggregate invariant would be broken.

    Example: removing the last author of a guide.
    """

    def __init__(self, aggregate: str, invariant: str) -> None:
        message = f"Invariant violation in {aggregate}: {invariant}"
        super().__init__(message, {"aggregate": aggregate, "invariant": invariant})
        self.aggregate = aggregate
        self.invariant = invariant


class AuthorizationError(DomainError):
    """
    Raised when the caller is not allowed to perform an operation.

    Example: a student updating a guide they are not an author of.
    """

    def __init__(self, message: str = "Not authorized to perform this action") -> None:
        super().__init__(message)


class AuthenticationRequiredError(AuthorizationError):
    """Raised when an anonymous caller attempts a protected operation."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)
