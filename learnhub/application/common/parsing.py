"""Conversion of primitive inputs into domain types."""

from collections.abc import Iterable
from enum import Enum
from typing import TypeVar

from learnhub.domain.common.exceptions import ValidationError
from learnhub.domain.common.value_objects.ids import UserId

E = TypeVar("E", bound=Enum)


def parse_enum(enum_type: type[E], value: E | str, field: str) -> E:
    """
    Convert a raw value into a member of enum_type.

    Raises:
        ValidationError: If the value is not a member
    """
    try:
        return enum_type(value)
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_type)
        raise ValidationError(
            f"Invalid {field} '{value}', expected one of: {allowed}", field=field, value=value
        ) from e


def parse_user_id(user_id: UserId | str) -> UserId:
    return user_id if isinstance(user_id, UserId) else UserId(user_id)


def parse_user_ids(user_ids: Iterable[UserId | str]) -> set[UserId]:
    return {parse_user_id(user_id) for user_id in user_ids}
