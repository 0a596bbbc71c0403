"""Metric week: the ten-day window around a day of the year."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from metric_clock.core.metric import DAYS_IN_YY, MetricTime, decode

DAYS_IN_WEEK: Final[int] = 10

__all__ = ["DAYS_IN_WEEK", "WeekDay", "week_bounds", "week_window"]


@dataclass(frozen=True)
class WeekDay:
    day: int
    metric_time: MetricTime
    civil_seconds: int


def week_bounds(metric: MetricTime) -> tuple[int, int]:
    """Return the nominal first and last day of the week containing ``metric``."""
    start = (metric.ddd // DAYS_IN_WEEK) * DAYS_IN_WEEK
    return start, start + DAYS_IN_WEEK - 1


def week_window(metric: MetricTime) -> list[WeekDay]:
    """List the days of the current metric week at the start of each day.

    Days past the end of the year are left out, so the list holds at most
    ten entries in ascending order.
    """
    start, end = week_bounds(metric)
    window: list[WeekDay] = []
    for day in range(start, end + 1):
        if day >= DAYS_IN_YY:
            break
        day_start = MetricTime(yy=metric.yy, ddd=day, hh=0, mmm=0)
        window.append(WeekDay(day=day, metric_time=day_start, civil_seconds=decode(day_start)))
    return window
