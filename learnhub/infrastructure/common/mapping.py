"""Helpers shared by the ORM <-> domain mappers."""

from collections.abc import Callable, Hashable, Iterable
from datetime import UTC, datetime
from typing import TypeVar

R = TypeVar("R")
K = TypeVar("K", bound=Hashable)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes (SQLite drops the timezone)."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def ensure_utc_required(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def sync_rows(
    rows: list[R],
    wanted: Iterable[K],
    key: Callable[[R], K],
    build: Callable[[K], R],
) -> None:
    """
    Make an ORM child collection match the wanted keys.

    Rows whose key is still wanted are kept untouched, so unchanged
    association rows are never deleted and re-inserted within one flush.
    """
    wanted_keys = list(dict.fromkeys(wanted))
    wanted_set = set(wanted_keys)
    for row in list(rows):
        if key(row) not in wanted_set:
            rows.remove(row)
    present = {key(row) for row in rows}
    for wanted_key in wanted_keys:
        if wanted_key not in present:
            rows.append(build(wanted_key))
