"""Conversion service backing the interactive clock.

The service holds no current instant of its own: every call receives the
instant being displayed and returns a complete new view of its successor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, Literal

from metric_clock.core import civil
from metric_clock.core.civil import Clock, SystemClock
from metric_clock.core.fields import (
    METRIC_FIELDS,
    MetricField,
    edit_field,
    field_max,
    nudge_field,
    zero_field,
)
from metric_clock.core.metric import MetricTime, decode, encode, normalize, step
from metric_clock.core.state import format_label, format_state, parse_state
from metric_clock.core.week import week_bounds, week_window
from metric_clock.schemas.clock import (
    ConversionOut,
    FieldMaxima,
    MetricTimeOut,
    NavCardOut,
    WeekDayOut,
    WeekOut,
)

logger = logging.getLogger(__name__)

NavAction = Literal[
    "previous_week",
    "next_week",
    "previous_season",
    "next_season",
    "last_year",
    "next_year",
    "reset_season",
    "end_of_year",
]


@dataclass(frozen=True)
class NavPreset:
    """A named jump: a step by years/days, or a direct ``ddd`` edit."""

    action: NavAction
    label: str
    years: int = 0
    days: int = 0
    set_day: int | None = None
    highlight: bool = False

    def apply(self, metric: MetricTime) -> MetricTime:
        if self.set_day is not None:
            return edit_field(metric, "ddd", self.set_day)
        return step(metric, self.years, self.days)

    def sub_label(self, metric: MetricTime) -> str:
        if self.set_day is not None:
            return f"Day {self.set_day:03d}"
        if self.years:
            return f"YY {metric.yy + self.years}"
        return f"Day {metric.ddd + self.days}"


NAV_PRESETS: Final[tuple[NavPreset, ...]] = (
    NavPreset("previous_week", "Previous Week", days=-10),
    NavPreset("next_week", "Next Week", days=10),
    NavPreset("previous_season", "Previous Season", days=-100),
    NavPreset("next_season", "Next Season", days=100),
    NavPreset("last_year", "Last Year", years=-1),
    NavPreset("next_year", "Next Year", years=1),
    NavPreset("reset_season", "Reset Season", set_day=0, highlight=True),
    NavPreset("end_of_year", "End of Year", set_day=999, highlight=True),
)

_PRESETS_BY_ACTION: Final[dict[str, NavPreset]] = {preset.action: preset for preset in NAV_PRESETS}


def _metric_out(metric: MetricTime) -> MetricTimeOut:
    return MetricTimeOut(yy=metric.yy, ddd=metric.ddd, hh=metric.hh, mmm=metric.mmm)


class ConverterService:
    """Builds conversion views and applies edits, steps and jumps."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    def now(self) -> ConversionOut:
        """Resync to the clock's current instant."""
        return self.from_seconds(self._clock.now_seconds())

    def resolve(self, token: str | None) -> MetricTime:
        """Return the instant named by ``token``, or now when it is unusable."""
        parsed = parse_state(token)
        if parsed is None:
            if token:
                logger.debug("Ignoring malformed state token %r; using now", token)
            return encode(self._clock.now_seconds())
        return normalize(parsed)

    def from_state(self, token: str | None) -> ConversionOut:
        return self.view(self.resolve(token))

    def from_seconds(self, seconds: int) -> ConversionOut:
        return self.view(encode(seconds))

    def edit(self, metric: MetricTime, field: MetricField, raw: object) -> ConversionOut:
        return self.view(edit_field(metric, field, raw))

    def zero(self, metric: MetricTime, field: MetricField) -> ConversionOut:
        return self.view(zero_field(metric, field))

    def nudge(self, metric: MetricTime, field: MetricField, delta: int = 1) -> ConversionOut:
        return self.view(nudge_field(metric, field, delta))

    def step(self, metric: MetricTime, years: int = 0, days: int = 0) -> ConversionOut:
        return self.view(step(metric, years, days))

    def navigate(self, metric: MetricTime, action: str) -> ConversionOut | None:
        """Apply a named jump; unknown actions return None."""
        preset = _PRESETS_BY_ACTION.get(action)
        if preset is None:
            return None
        return self.view(preset.apply(metric))

    def navigation_cards(self, metric: MetricTime) -> list[NavCardOut]:
        cards: list[NavCardOut] = []
        for preset in NAV_PRESETS:
            target = preset.apply(metric)
            cards.append(
                NavCardOut(
                    action=preset.action,
                    label=preset.label,
                    sub_label=preset.sub_label(metric),
                    highlight=preset.highlight,
                    target=_metric_out(target),
                    target_state=format_state(target),
                    target_label=format_label(target),
                )
            )
        return cards

    def week(self, metric: MetricTime) -> WeekOut:
        start, end = week_bounds(metric)
        days = [
            WeekDayOut(
                day=entry.day,
                metric=_metric_out(entry.metric_time),
                civil_seconds=entry.civil_seconds,
                state=format_state(entry.metric_time),
                short_date=civil.render_short_date(entry.civil_seconds),
                current=entry.day == metric.ddd,
            )
            for entry in week_window(metric)
        ]
        return WeekOut(start=start, end=end, days=days)

    def view(self, metric: MetricTime) -> ConversionOut:
        """Render ``metric`` in both notations with its week strip and jumps.

        Fields passed straight to decode can overshoot their ranges. The state
        token, week strip and jumps are built from the canonical form.
        """
        seconds = decode(metric)
        canonical = normalize(metric)
        local = civil.render_local(seconds)
        utc = civil.render_utc(seconds)
        if utc is None:
            logger.debug("Instant %d is outside the representable civil range", seconds)

        return ConversionOut(
            metric=_metric_out(metric),
            unix_seconds=seconds,
            state=format_state(canonical),
            label=format_label(canonical),
            local=local,
            utc=utc,
            maxima=FieldMaxima(**{field: field_max(field) for field in METRIC_FIELDS}),
            week=self.week(canonical),
            navigation=self.navigation_cards(canonical),
        )


def get_converter_service(clock: Clock | None = None) -> ConverterService:
    """Return a new conversion service instance."""
    return ConverterService(clock)
