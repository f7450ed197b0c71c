"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Valid User and Product records
- A populated schema registry
"""

import pytest

from src.adapters.registry import InMemorySchemaRegistry, build_default_registry
from src.domain.records import Product, User


@pytest.fixture
def valid_user() -> User:
    """User record satisfying every constraint."""
    return User(name="alice", age=30, email="alice@example.com", password="secret")


@pytest.fixture
def valid_product() -> Product:
    """Product record satisfying every constraint."""
    return Product(name="widget", price=2_000_000, stock=10)


@pytest.fixture
def registry() -> InMemorySchemaRegistry:
    """Registry holding the User and Product schemas."""
    return build_default_registry()
