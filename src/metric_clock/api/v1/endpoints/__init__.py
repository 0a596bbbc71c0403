# src/metric_clock/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .clock import router as clock_router
from .system import router as system_router

__all__ = [
    "clock_router",
    "system_router",
]
