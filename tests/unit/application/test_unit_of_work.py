"""Tests for event dispatch in the unit of work."""

from uuid import uuid4

import pytest

from learnhub.application.common.unit_of_work import UnitOfWork
from learnhub.domain.common.domain_event import DomainEvent
from learnhub.domain.common.value_objects.ids import ChallengeId, UserId
from learnhub.domain.guides.entities.guide import Guide


class InMemoryUnitOfWork(UnitOfWork):
    def __init__(self, fail_commit: bool = False) -> None:
        super().__init__()
        self.fail_commit = fail_commit
        self.committed = False
        self.rolled_back = False

    def _commit(self) -> None:
        if self.fail_commit:
            raise RuntimeError("commit failed")
        self.committed = True

    def _rollback(self) -> None:
        self.rolled_back = True


def guide_with_challenge() -> Guide:
    guide = Guide.create(title="Intro", author_ids={UserId("teacher-1")}, max_authors=5)
    guide.add_challenge(ChallengeId(uuid4()))
    return guide


def test_events_are_dispatched_after_commit() -> None:
    uow = InMemoryUnitOfWork()
    received: list[DomainEvent] = []
    uow.register_event_handler(received.append)
    guide = guide_with_challenge()

    with uow:
        uow.track(guide)
        assert received == []
        uow.commit()

    assert uow.committed
    assert len(received) == 1
    assert guide.pending_events == []


def test_failed_commit_discards_events() -> None:
    uow = InMemoryUnitOfWork(fail_commit=True)
    received: list[DomainEvent] = []
    uow.register_event_handler(received.append)
    guide = guide_with_challenge()

    with pytest.raises(RuntimeError), uow:
        uow.track(guide)
        uow.commit()

    assert received == []
    assert uow.rolled_back
    assert guide.pending_events == []


def test_error_inside_block_rolls_back_without_dispatch() -> None:
    uow = InMemoryUnitOfWork()
    received: list[DomainEvent] = []
    uow.register_event_handler(received.append)

    with pytest.raises(ValueError), uow:
        uow.track(guide_with_challenge())
        raise ValueError("boom")

    assert uow.rolled_back
    assert not uow.committed
    assert received == []


def test_tracking_the_same_aggregate_twice_dispatches_once() -> None:
    uow = InMemoryUnitOfWork()
    received: list[DomainEvent] = []
    uow.register_event_handler(received.append)
    guide = guide_with_challenge()

    uow.track(guide, guide)
    uow.commit()

    assert len(received) == 1
