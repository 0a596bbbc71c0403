"""Direct field edits with coercion and range clamping.

Every edit produces a valid value: unparseable input becomes ``0`` and
out-of-range input is pinned to the nearest bound. ``yy`` is never clamped.
"""

from __future__ import annotations

import math
import re
from dataclasses import replace
from typing import Final, Literal, get_args

from metric_clock.core.metric import MetricTime

MetricField = Literal["yy", "ddd", "hh", "mmm"]

METRIC_FIELDS: Final[tuple[MetricField, ...]] = get_args(MetricField)

# Inclusive bounds per field; None means unbounded.
FIELD_BOUNDS: Final[dict[MetricField, tuple[int, int] | None]] = {
    "yy": None,
    "ddd": (0, 999),
    "hh": (0, 99),
    "mmm": (0, 999),
}

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")

__all__ = [
    "FIELD_BOUNDS",
    "METRIC_FIELDS",
    "MetricField",
    "clamp_field",
    "coerce_int",
    "edit_field",
    "field_max",
    "nudge_field",
    "zero_field",
]


def coerce_int(raw: object) -> int:
    """Read an integer the way a numeric form input would.

    Strings are read by their leading signed digits (``"12abc"`` is 12);
    anything without leading digits becomes ``0``.
    """
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if not math.isfinite(raw):
            return 0
        return int(raw)
    if isinstance(raw, str):
        match = _LEADING_INT.match(raw)
        if match is None:
            return 0
        try:
            return int(match.group(1))
        except ValueError:
            # longer than the interpreter's int string conversion limit
            return 0
    return 0


def clamp_field(field: MetricField, value: int) -> int:
    """Pin ``value`` into the accepted range of ``field``."""
    if field not in FIELD_BOUNDS:
        raise ValueError(f"Unknown metric field: {field!r}")
    bounds = FIELD_BOUNDS[field]
    if bounds is None:
        return value
    low, high = bounds
    return max(low, min(high, value))


def field_max(field: MetricField) -> int | None:
    bounds = FIELD_BOUNDS[field]
    return None if bounds is None else bounds[1]


def _set_field(metric: MetricTime, field: MetricField, value: int) -> MetricTime:
    if field == "yy":
        return replace(metric, yy=value)
    if field == "ddd":
        return replace(metric, ddd=value)
    if field == "hh":
        return replace(metric, hh=value)
    if field == "mmm":
        return replace(metric, mmm=value)
    raise ValueError(f"Unknown metric field: {field!r}")


def _get_field(metric: MetricTime, field: MetricField) -> int:
    if field == "yy":
        return metric.yy
    if field == "ddd":
        return metric.ddd
    if field == "hh":
        return metric.hh
    if field == "mmm":
        return metric.mmm
    raise ValueError(f"Unknown metric field: {field!r}")


def edit_field(metric: MetricTime, field: MetricField, raw: object) -> MetricTime:
    """Return ``metric`` with ``field`` replaced by the coerced, clamped ``raw``."""
    return _set_field(metric, field, clamp_field(field, coerce_int(raw)))


def zero_field(metric: MetricTime, field: MetricField) -> MetricTime:
    return _set_field(metric, field, 0)


def nudge_field(metric: MetricTime, field: MetricField, delta: int = 1) -> MetricTime:
    """Increment or decrement ``field`` by ``delta``, clamped to its range."""
    return _set_field(metric, field, clamp_field(field, _get_field(metric, field) + delta))
