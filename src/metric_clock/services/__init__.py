# src/metric_clock/services/__init__.py
"""Presentation services for the Metric Clock application."""

from .converter import NAV_PRESETS, ConverterService, NavPreset, get_converter_service

__all__ = [
    "ConverterService",
    "NAV_PRESETS",
    "NavPreset",
    "get_converter_service",
]
