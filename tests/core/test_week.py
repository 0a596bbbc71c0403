"""Tests for the metric week window."""

from __future__ import annotations

from metric_clock.core.metric import MetricTime, decode
from metric_clock.core.week import week_bounds, week_window


def test_window_around_day_24() -> None:
    window = week_window(MetricTime(yy=17, ddd=24, hh=5, mmm=6))
    assert [entry.day for entry in window] == list(range(20, 30))


def test_last_window_of_year() -> None:
    window = week_window(MetricTime(yy=17, ddd=995))
    assert [entry.day for entry in window] == list(range(990, 1000))


def test_entries_start_at_midnight_of_same_year() -> None:
    for entry in week_window(MetricTime(yy=-2, ddd=31, hh=40, mmm=400)):
        assert entry.metric_time == MetricTime(yy=-2, ddd=entry.day, hh=0, mmm=0)
        assert entry.civil_seconds == decode(entry.metric_time)


def test_window_is_ascending_and_consecutive() -> None:
    window = week_window(MetricTime(yy=0, ddd=0))
    seconds = [entry.civil_seconds for entry in window]
    assert seconds == sorted(seconds)
    assert seconds[1] - seconds[0] == 100_000


def test_week_bounds() -> None:
    assert week_bounds(MetricTime(yy=0, ddd=24)) == (20, 29)
    assert week_bounds(MetricTime(yy=0, ddd=0)) == (0, 9)
    assert week_bounds(MetricTime(yy=0, ddd=999)) == (990, 999)


def test_window_never_passes_day_999() -> None:
    # Out-of-range days only reach here through raw decode input.
    assert week_window(MetricTime(yy=0, ddd=1005)) == []
