"""Metric time encoding.

Metric time is a mixed-radix decomposition of whole seconds since the Unix
epoch: one metric year (``yy``) is 10^8 seconds, split into 1000 days
(``ddd``) of 100 hours (``hh``) of 1000 units (``mmm``).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Final

SECONDS_IN_YY: Final[int] = 100_000_000
SECONDS_IN_DDD: Final[int] = 100_000
SECONDS_IN_HH: Final[int] = 1_000
SECONDS_IN_MMM: Final[int] = 1
DAYS_IN_YY: Final[int] = SECONDS_IN_YY // SECONDS_IN_DDD

__all__ = [
    "DAYS_IN_YY",
    "SECONDS_IN_DDD",
    "SECONDS_IN_HH",
    "SECONDS_IN_MMM",
    "SECONDS_IN_YY",
    "MetricTime",
    "decode",
    "encode",
    "floor_divmod",
    "normalize",
    "step",
]


@dataclass(frozen=True)
class MetricTime:
    """A metric instant.

    Fields are not range-checked here; :func:`encode` always yields
    ``ddd``/``mmm`` in ``[0, 999]`` and ``hh`` in ``[0, 99]``.
    """

    yy: int
    ddd: int
    hh: int = 0
    mmm: int = 0


def floor_divmod(value: int, radix: int) -> tuple[int, int]:
    """Return ``(quotient, remainder)`` with the remainder in ``[0, radix)``.

    Pre-epoch instants only round-trip with floored division.
    """
    quotient = value // radix
    return quotient, value - quotient * radix


def encode(seconds: int) -> MetricTime:
    """Convert whole seconds since the Unix epoch into metric time."""
    yy, rem = floor_divmod(int(seconds), SECONDS_IN_YY)
    ddd, rem = floor_divmod(rem, SECONDS_IN_DDD)
    hh, mmm = floor_divmod(rem, SECONDS_IN_HH)
    return MetricTime(yy=yy, ddd=ddd, hh=hh, mmm=mmm)


def decode(metric: MetricTime) -> int:
    """Convert metric time back into seconds since the Unix epoch.

    Out-of-range fields are accepted and simply fold into the weighted sum.
    """
    return (
        metric.yy * SECONDS_IN_YY
        + metric.ddd * SECONDS_IN_DDD
        + metric.hh * SECONDS_IN_HH
        + metric.mmm * SECONDS_IN_MMM
    )


def normalize(metric: MetricTime) -> MetricTime:
    """Fold overshooting fields into their canonical ranges."""
    return encode(decode(metric))


def step(metric: MetricTime, delta_years: int = 0, delta_days: int = 0) -> MetricTime:
    """Move ``metric`` by whole years and days, carrying days into years.

    ``hh`` and ``mmm`` are kept as they are; only ``yy`` and ``ddd`` move.
    """
    new_yy = metric.yy + delta_years
    new_ddd = metric.ddd + delta_days

    if new_ddd >= DAYS_IN_YY:
        new_yy += new_ddd // DAYS_IN_YY
        new_ddd %= DAYS_IN_YY
    elif new_ddd < 0:
        # ceil(|ddd| / 1000) without going through floats
        borrow = -(new_ddd // DAYS_IN_YY)
        new_yy -= borrow
        new_ddd += borrow * DAYS_IN_YY

    return replace(metric, yy=new_yy, ddd=new_ddd)
