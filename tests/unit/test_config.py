"""Tests for application settings."""

from collections.abc import Generator

import pytest
import structlog
from pydantic import ValidationError

from learnhub.config import Settings, configure_logging


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.MAX_AUTHORS_PER_GUIDE == 5
    assert settings.MAX_AUTHORS_PER_COURSE == 5
    assert settings.GUIDE_CHALLENGE_ADDED_TOPIC == "guides.challenge.added.v1"


@pytest.mark.parametrize("field", ["MAX_AUTHORS_PER_GUIDE", "MAX_AUTHORS_PER_COURSE"])
def test_author_limits_must_be_positive(field: str) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: 0})


def test_topic_name_cannot_be_blank() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, GUIDE_CHALLENGE_ADDED_TOPIC="   ")


def test_topic_name_is_trimmed() -> None:
    settings = Settings(_env_file=None, GUIDE_CHALLENGE_ADDED_TOPIC=" guides.events ")

    assert settings.GUIDE_CHALLENGE_ADDED_TOPIC == "guides.events"


def test_broker_timeout_must_be_positive() -> None:
    assert Settings(_env_file=None).EVENT_BROKER_TIMEOUT_SECONDS == 2.0
    with pytest.raises(ValidationError):
        Settings(_env_file=None, EVENT_BROKER_TIMEOUT_SECONDS=0)


@pytest.fixture
def reset_structlog() -> Generator[None, None, None]:
    yield
    structlog.reset_defaults()


@pytest.mark.parametrize(
    ("environment", "renderer"),
    [
        ("production", structlog.processors.JSONRenderer),
        ("development", structlog.dev.ConsoleRenderer),
        ("test", structlog.dev.ConsoleRenderer),
    ],
)
def test_configure_logging_picks_renderer(
    reset_structlog: None, environment: str, renderer: type
) -> None:
    configure_logging(environment)

    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], renderer)
    assert structlog.get_config()["wrapper_class"] is structlog.stdlib.BoundLogger
