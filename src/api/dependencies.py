"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the schema
registry and the intake service into routes.
"""

from fastapi import Request

from src.domain.intake import IntakeService
from src.domain.ports import SchemaRegistry


def get_registry(request: Request) -> SchemaRegistry:
    """
    Get schema registry from app state.

    The registry is built during app lifespan startup and stored in app.state.
    """
    return request.app.state.registry


def get_intake_service(request: Request) -> IntakeService:
    """Create intake service bound to the app's schema registry."""
    return IntakeService(registry=get_registry(request))
