"""System and transparency endpoints for the Metric Clock API."""

from __future__ import annotations

import time

from fastapi import APIRouter

from metric_clock.core.fields import FIELD_BOUNDS
from metric_clock.core.metric import SECONDS_IN_DDD, SECONDS_IN_HH, SECONDS_IN_MMM, SECONDS_IN_YY
from metric_clock.core.settings import settings
from metric_clock.core.week import DAYS_IN_WEEK
from metric_clock.services.converter import NAV_PRESETS

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/config")
async def get_public_config() -> dict[str, object]:
    """Return a sanitized snapshot of public runtime configuration.

    Returns:
        Dictionary containing app settings, the metric radix table, field
        bounds and the available navigation jumps
    """
    return {
        "app": {
            "name": settings.app_name,
            "version": settings.app_version,
            "debug": settings.debug,
        },
        "radix": {
            "seconds_in_yy": SECONDS_IN_YY,
            "seconds_in_ddd": SECONDS_IN_DDD,
            "seconds_in_hh": SECONDS_IN_HH,
            "seconds_in_mmm": SECONDS_IN_MMM,
            "days_in_week": DAYS_IN_WEEK,
        },
        "fields": {
            field: None if bounds is None else {"min": bounds[0], "max": bounds[1]}
            for field, bounds in FIELD_BOUNDS.items()
        },
        "navigation": [
            {
                "action": preset.action,
                "label": preset.label,
                "years": preset.years,
                "days": preset.days,
                "set_day": preset.set_day,
            }
            for preset in NAV_PRESETS
        ],
    }


@router.get("/status")
async def get_system_status() -> dict[str, object]:
    """Get overall system status for monitoring dashboards.

    Returns:
        Dictionary with service information, version, status, and environment
    """
    return {
        "service": "metric-clock",
        "version": settings.app_version,
        "status": "operational",
        "timestamp": int(time.time()),
        "environment": settings.environment,
    }
