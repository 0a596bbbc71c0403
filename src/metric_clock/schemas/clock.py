"""Metric clock Pydantic schemas."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from metric_clock.core.fields import MetricField


class MetricTimeOut(BaseModel):
    """The four metric fields of an instant."""

    yy: int
    ddd: int
    hh: int
    mmm: int


class FieldMaxima(BaseModel):
    """Upper bounds shown next to the editable fields; ``yy`` has none."""

    yy: int | None = None
    ddd: int | None = 999
    hh: int | None = 99
    mmm: int | None = 999


class WeekDayOut(BaseModel):
    """One day of the metric week strip."""

    day: int
    metric: MetricTimeOut
    civil_seconds: int
    state: str
    short_date: str | None = Field(None, description="Local month/day, None when unrepresentable")
    current: bool = False


class WeekOut(BaseModel):
    """The ten-day window around the current day."""

    start: int
    end: int
    days: list[WeekDayOut]


class NavCardOut(BaseModel):
    """A navigation shortcut and the instant it leads to."""

    action: str
    label: str
    sub_label: str
    highlight: bool = False
    target: MetricTimeOut
    target_state: str
    target_label: str


class ConversionOut(BaseModel):
    """Everything needed to render one instant in both notations."""

    metric: MetricTimeOut
    unix_seconds: int
    state: str
    label: str
    local: str | None = Field(None, description="Host local time, None when unrepresentable")
    utc: str | None = Field(None, description="UTC time, None when unrepresentable")
    maxima: FieldMaxima = Field(default_factory=FieldMaxima)
    week: WeekOut
    navigation: list[NavCardOut]


class FieldEditIn(BaseModel):
    """Direct edit of a single metric field.

    ``value`` accepts any scalar; unparseable input becomes 0 and the result
    is clamped to the field's range.
    """

    state: str | None = Field(None, description="State token to edit; omitted means now")
    field: MetricField
    value: Any = None


class FieldActionIn(BaseModel):
    """Zero or nudge a single metric field."""

    state: str | None = Field(None, description="State token to edit; omitted means now")
    field: MetricField
    delta: int = Field(1, description="Step applied by nudge; ignored by zero")
