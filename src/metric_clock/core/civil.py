"""Civil time rendering and the clock source."""

from __future__ import annotations

import math
import time
from datetime import UTC, datetime, timedelta
from typing import Final, Protocol

UNIX_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=UTC)

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "UNIX_EPOCH",
    "render_local",
    "render_short_date",
    "render_utc",
    "to_datetime",
]


class Clock(Protocol):
    """Source of the current instant. Inject a fake in tests."""

    def now_seconds(self) -> int: ...


class SystemClock:
    """Clock backed by the host's wall clock."""

    def now_seconds(self) -> int:
        return math.floor(time.time())


class FixedClock:
    """Clock pinned to a single instant."""

    def __init__(self, seconds: int) -> None:
        self.seconds = seconds

    def now_seconds(self) -> int:
        return self.seconds


def to_datetime(seconds: int) -> datetime | None:
    """Return the UTC datetime for ``seconds``, or None when out of range."""
    try:
        return UNIX_EPOCH + timedelta(seconds=seconds)
    except OverflowError:
        return None


def _to_local(seconds: int) -> datetime | None:
    moment = to_datetime(seconds)
    if moment is None:
        return None
    try:
        return moment.astimezone()
    except (OverflowError, ValueError, OSError):
        return None


def render_local(seconds: int) -> str | None:
    """Host local time, e.g. ``Thu, Jan 1, 1970, 00:00:00``."""
    moment = _to_local(seconds)
    if moment is None:
        return None
    return (
        f"{moment:%a}, {moment:%b} {moment.day}, {moment.year}, "
        f"{moment:%H:%M:%S}"
    )


def render_utc(seconds: int) -> str | None:
    """UTC in ISO order without the ``T`` separator."""
    moment = to_datetime(seconds)
    if moment is None:
        return None
    return f"{moment.year:04d}-{moment:%m-%d %H:%M:%S}"


def render_short_date(seconds: int) -> str | None:
    """Local ``month/day`` for the week strip."""
    moment = _to_local(seconds)
    if moment is None:
        return None
    return f"{moment.month}/{moment.day}"
