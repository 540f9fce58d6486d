"""Pytest configuration and fixtures."""

from collections.abc import Callable, Generator

import pytest
from dependency_injector import providers
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import learnhub.models  # noqa: F401
from learnhub.config import Settings
from learnhub.core import Container
from learnhub.database import Base
from learnhub.domain.guides.entities.guide import Guide
from learnhub.domain.identity.caller import Caller, Role

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


class RecordingEventPublisher:
    """Event publisher that keeps every published event in memory."""

    def __init__(self) -> None:
        self.published: list[tuple[str, str, dict[str, object]]] = []

    def publish(self, topic: str, key: str, event: dict[str, object]) -> None:
        self.published.append((topic, key, event))


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        DATABASE_URL=TEST_DATABASE_URL,
        ENVIRONMENT="test",
        MAX_AUTHORS_PER_GUIDE=5,
        MAX_AUTHORS_PER_COURSE=5,
    )


@pytest.fixture
def published_events() -> RecordingEventPublisher:
    return RecordingEventPublisher()


@pytest.fixture
def container(
    db_session: Session, settings: Settings, published_events: RecordingEventPublisher
) -> Container:
    """Container wired to the test session, test settings and the recording publisher."""
    test_container = Container()
    test_container.db.override(db_session)
    test_container.settings.override(providers.Object(settings))
    test_container.event_publisher.override(providers.Object(published_events))
    return test_container


@pytest.fixture
def teacher() -> Caller:
    return Caller.authenticated("teacher-1", Role.TEACHER)


@pytest.fixture
def other_teacher() -> Caller:
    return Caller.authenticated("teacher-2", Role.TEACHER)


@pytest.fixture
def student() -> Caller:
    return Caller.authenticated("student-1", Role.STUDENT)


@pytest.fixture
def admin() -> Caller:
    return Caller.authenticated("admin-1", Role.ADMIN)


@pytest.fixture
def anonymous() -> Caller:
    return Caller.anonymous()


@pytest.fixture
def make_published_guide(container: Container, teacher: Caller) -> Callable[..., Guide]:
    """Factory creating a guide owned by the teacher with the given number of pages, published."""

    def _make(title: str = "Intro to Python", pages: int = 0) -> Guide:
        guide = container.guide_management_use_case().create_guide(teacher, title=title)
        page_use_case = container.page_use_case()
        for order in range(1, pages + 1):
            page_use_case.create_page(teacher, guide.id.value, f"Page {order}", order)
        return container.guide_management_use_case().update_status(
            teacher, guide.id.value, "PUBLISHED"
        )

    return _make
