"""Metric time arithmetic: encoding, stepping, clamping and formatting."""

from .fields import MetricField, clamp_field, coerce_int, edit_field, nudge_field, zero_field
from .metric import MetricTime, decode, encode, normalize, step
from .state import format_label, format_state, parse_state
from .week import WeekDay, week_bounds, week_window

__all__ = [
    "MetricField",
    "MetricTime",
    "WeekDay",
    "clamp_field",
    "coerce_int",
    "decode",
    "edit_field",
    "encode",
    "format_label",
    "format_state",
    "normalize",
    "nudge_field",
    "parse_state",
    "step",
    "week_bounds",
    "week_window",
    "zero_field",
]
