"""Registry adapters - Schema registry implementations."""

from .memory import InMemorySchemaRegistry, build_default_registry

__all__ = ["InMemorySchemaRegistry", "build_default_registry"]
