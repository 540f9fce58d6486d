"""Caller value object carrying the identity behind each use-case call."""

from dataclasses import dataclass, field
from enum import Enum

from learnhub.domain.common.exceptions import (
    AuthenticationRequiredError,
    AuthorizationError,
    ValidationError,
)
from learnhub.domain.common.value_object import ValueObject
from learnhub.domain.common.value_objects.ids import UserId


class Role(str, Enum):
    STUDENT = "STUDENT"
    TEACHER = "TEACHER"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class Caller(ValueObject):
    """
    Identity and roles of whoever invoked an operation.

    The transport layer builds a Caller from the verified token and passes it
    explicitly to every use-case method. An anonymous caller has no user id
    and no roles.
    """

    user_id: UserId | None = None
    roles: frozenset[Role] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.user_id is None and self.roles:
            raise ValidationError("Anonymous caller cannot hold roles", field="roles")

    @classmethod
    def anonymous(cls) -> "Caller":
        return cls()

    @classmethod
    def authenticated(cls, user_id: UserId | str, *roles: Role) -> "Caller":
        """Build a caller for a verified user; plain strings are wrapped in UserId."""
        uid = user_id if isinstance(user_id, UserId) else UserId(user_id)
        return cls(user_id=uid, roles=frozenset(roles))

    def current_user_id(self) -> UserId | None:
        return self.user_id

    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def has_role(self, role: Role) -> bool:
        return role in self.roles

    def is_admin(self) -> bool:
        return self.has_role(Role.ADMIN)

    def require_authentication(self) -> None:
        if not self.is_authenticated():
            raise AuthenticationRequiredError()

    def require_user(self) -> UserId:
        """
        Return the authenticated user's id.

        Raises:
            AuthenticationRequiredError: If the caller is anonymous
        """
        if self.user_id is None:
            raise AuthenticationRequiredError()
        return self.user_id

    def require_role(self, role: Role) -> None:
        self.require_any_role(role)

    def require_any_role(self, *roles: Role) -> None:
        """
        Ensure the caller holds at least one of the given roles.

        Raises:
            AuthenticationRequiredError: If the caller is anonymous
            AuthorizationError: If the caller holds none of the roles
        """
        self.require_authentication()
        if not any(self.has_role(role) for role in roles):
            names = ", ".join(role.value for role in roles)
            raise AuthorizationError(f"One of the roles [{names}] is required")

    def is_self_or_admin(self, user_id: UserId) -> bool:
        return self.user_id == user_id or self.is_admin()

    def require_self_or_admin(self, user_id: UserId) -> None:
        self.require_authentication()
        if not self.is_self_or_admin(user_id):
            raise AuthorizationError("Not authorized to access another user's data")
