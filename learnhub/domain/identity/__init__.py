"""Identity domain layer."""

from learnhub.domain.identity.caller import Caller, Role

__all__ = [
    "Caller",
    "Role",
]
