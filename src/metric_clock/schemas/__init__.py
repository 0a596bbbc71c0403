"""Pydantic schemas for the Metric Clock API."""

from .clock import (
    ConversionOut,
    FieldActionIn,
    FieldEditIn,
    FieldMaxima,
    MetricTimeOut,
    NavCardOut,
    WeekDayOut,
    WeekOut,
)

__all__ = [
    "ConversionOut",
    "FieldActionIn",
    "FieldEditIn",
    "FieldMaxima",
    "MetricTimeOut",
    "NavCardOut",
    "WeekDayOut",
    "WeekOut",
]
