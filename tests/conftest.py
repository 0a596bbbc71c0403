# tests/conftest.py
from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from metric_clock.api.v1.endpoints import clock as clock_endpoints
from metric_clock.core.civil import FixedClock
from metric_clock.main import app as fastapi_app
from metric_clock.services.converter import ConverterService

# 17-006-00-000: 1_700_600_000 seconds after the epoch (2023-11-21 UTC)
FROZEN_SECONDS = 1_700_600_000
FROZEN_STATE = "17-006-00-000"


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture()
def frozen_clock() -> FixedClock:
    return FixedClock(FROZEN_SECONDS)


@pytest.fixture(autouse=True)
def override_clock_dependency(app: FastAPI, frozen_clock: FixedClock) -> Iterator[None]:
    app.dependency_overrides[clock_endpoints.get_clock] = lambda: frozen_clock
    try:
        yield
    finally:
        app.dependency_overrides.pop(clock_endpoints.get_clock, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def converter(frozen_clock: FixedClock) -> ConverterService:
    """Conversion service whose "now" is FROZEN_SECONDS."""
    return ConverterService(frozen_clock)
