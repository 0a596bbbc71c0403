"""Metric clock conversion endpoints.

The current instant lives in the client, mirrored in the ``t`` query
parameter as a state token such as ``17-006-00-000``. Every endpoint takes
that token, applies one change and returns the complete new view, whose
``state`` the client echoes back on the next request. A missing or
malformed token means "now".
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from metric_clock.core.civil import Clock, SystemClock
from metric_clock.core.metric import MetricTime
from metric_clock.schemas.clock import ConversionOut, FieldActionIn, FieldEditIn, WeekOut
from metric_clock.services.converter import ConverterService, get_converter_service

router = APIRouter(prefix="/clock", tags=["clock"])


def get_clock() -> Clock:
    """Get the clock dependency for dependency injection."""
    return SystemClock()


def get_converter_service_dep(clock: Annotated[Clock, Depends(get_clock)]) -> ConverterService:
    """Get ConverterService dependency for dependency injection."""
    return get_converter_service(clock)


ConverterDep = Annotated[ConverterService, Depends(get_converter_service_dep)]
StateQuery = Annotated[
    str | None,
    Query(alias="t", description="State token, e.g. 17-006-00-000; omitted means now"),
]


@router.get("", response_model=ConversionOut)
async def get_state(converter: ConverterDep, t: StateQuery = None) -> ConversionOut:
    """Render the instant named by the state token, or now."""
    return converter.from_state(t)


@router.get("/now", response_model=ConversionOut)
async def get_now(converter: ConverterDep) -> ConversionOut:
    """Resync to the current instant."""
    return converter.now()


@router.get("/encode", response_model=ConversionOut)
async def encode_seconds(converter: ConverterDep, seconds: int) -> ConversionOut:
    """Convert Unix seconds (negative before 1970) into metric time."""
    return converter.from_seconds(seconds)


@router.get("/decode", response_model=ConversionOut)
async def decode_metric(
    converter: ConverterDep,
    yy: int = 0,
    ddd: int = 0,
    hh: int = 0,
    mmm: int = 0,
) -> ConversionOut:
    """Convert metric fields into Unix seconds.

    Fields are not clamped; out-of-range values fold into the result.
    """
    return converter.view(MetricTime(yy=yy, ddd=ddd, hh=hh, mmm=mmm))


@router.get("/step", response_model=ConversionOut)
async def step_state(
    converter: ConverterDep,
    t: StateQuery = None,
    years: int = 0,
    days: int = 0,
) -> ConversionOut:
    """Move by whole years and days, carrying days across the year boundary."""
    return converter.step(converter.resolve(t), years, days)


@router.get("/navigate/{action}", response_model=ConversionOut)
async def navigate_state(converter: ConverterDep, action: str, t: StateQuery = None) -> ConversionOut:
    """Apply a named jump such as ``next_week`` or ``end_of_year``."""
    view = converter.navigate(converter.resolve(t), action)
    if view is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown navigation action: {action}",
        )
    return view


@router.get("/week", response_model=WeekOut)
async def get_week(converter: ConverterDep, t: StateQuery = None) -> WeekOut:
    """Return the ten-day strip around the current day."""
    return converter.week(converter.resolve(t))


@router.post("/edit", response_model=ConversionOut)
async def edit_state(payload: FieldEditIn, converter: ConverterDep) -> ConversionOut:
    """Set one field directly; bad input becomes 0 and values are clamped."""
    return converter.edit(converter.resolve(payload.state), payload.field, payload.value)


@router.post("/zero", response_model=ConversionOut)
async def zero_state(payload: FieldActionIn, converter: ConverterDep) -> ConversionOut:
    """Reset one field to zero."""
    return converter.zero(converter.resolve(payload.state), payload.field)


@router.post("/nudge", response_model=ConversionOut)
async def nudge_state(payload: FieldActionIn, converter: ConverterDep) -> ConversionOut:
    """Increment or decrement one field by ``delta``, clamped to its range."""
    return converter.nudge(converter.resolve(payload.state), payload.field, payload.delta)
