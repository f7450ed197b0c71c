"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request

from src.adapters.registry import build_default_registry
from src.api.error_handlers import register_error_handlers
from src.api.models import HealthResponse
from src.api.v1 import router as v1_router
from src.config.logging import configure_logging
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Record intake API v1 - Submit users and products for constraint validation",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Configures logging from settings
    - Builds the schema registry on startup
    """
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    logger.info("Starting application...")

    # Store registry in app state for dependency injection
    registry = build_default_registry()
    app.state.registry = registry
    logger.info("Registered schemas: %s", ", ".join(registry.kinds()))

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title="structguard",
    description="Record intake API - Validates flat records against declarative constraints",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

register_error_handlers(app)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """
    Health check endpoint.

    Returns 200 OK with the registered record kinds.
    """
    registry = request.app.state.registry
    return HealthResponse(status="healthy", schemas=list(registry.kinds()))


def run() -> None:
    """Serve the application with uvicorn using configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
