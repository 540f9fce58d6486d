from collections.abc import Generator
from contextlib import contextmanager
from typing import TypeVar

from dependency_injector.providers import Provider

from learnhub.core import container
from learnhub.database import get_session_factory

T = TypeVar("T")


@contextmanager
def use_case_scope(provider: Provider[T]) -> Generator[T, None, None]:
    """
    Build a use case bound to a fresh database session.

    Overrides container.db for the duration of the block and closes the
    session afterwards.
    """
    db = get_session_factory()()
    try:
        with container.db.override(db):
            yield provider()
    finally:
        db.close()
