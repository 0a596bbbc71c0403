# src/metric_clock/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import clock_router, system_router

__all__ = [
    "clock_router",
    "system_router",
]
