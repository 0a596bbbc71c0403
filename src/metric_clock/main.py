# src/metric_clock/main.py
"""Main entry point for the Metric Clock application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from metric_clock.api.v1 import clock_router, system_router
from metric_clock.core.settings import settings

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Metric Clock API",
    description="Converts Unix time to and from fixed-radix metric time",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(clock_router, prefix="/api/v1")
app.include_router(system_router, prefix="/api/v1")


def configure_logging() -> None:
    """Apply the configured log level to the root logger."""
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging()
    logger.info("%s %s started (%s)", settings.app_name, settings.app_version, settings.environment)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Converts Unix time to and from fixed-radix metric time",
        "clock": "/api/v1/clock",
        "docs": "/docs",
        "redoc": "/redoc",
    }


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    configure_logging()
    uvicorn.run(
        "metric_clock.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
