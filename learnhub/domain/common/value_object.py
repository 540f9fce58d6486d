"""
Base class for Value Objects.

Ids, roles and callers are value objects: frozen dataclasses whose
__post_init__ rejects invalid input, e.g.

    @dataclass(frozen=True)
    class UserId(ValueObject):
        value: str
"""

from typing import Any


class ValueObject:
    """Equality, hashing and serialization derived from the instance attributes."""

    def _values(self) -> dict[str, Any]:
        return dict(self.__dict__)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueObject) or type(other) is not type(self):
            return False
        return self._values() == other._values()

    def __hash__(self) -> int:
        return hash((type(self).__name__, *sorted(self._values().items())))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self._values().items())
        return f"{type(self).__name__}({fields})"

    def to_primitive(self) -> object:
        """Single-field objects serialize to the bare value, others to a dict."""
        values = self._values()
        if len(values) == 1:
            return next(iter(values.values()))
        return values
