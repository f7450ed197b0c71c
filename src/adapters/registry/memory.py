"""
In-memory schema registry adapter - Implements SchemaRegistry protocol.

Schemas are registered once during application startup and only read
afterwards. RecordSchema values are immutable, so lookups can be shared
across concurrent requests without locking.
"""

import logging

from src.domain.constraints import RecordSchema
from src.domain.exceptions import DuplicateSchema, UnknownRecordKind
from src.domain.records import PRODUCT_SCHEMA, USER_SCHEMA

logger = logging.getLogger(__name__)


class InMemorySchemaRegistry:
    """
    Implements SchemaRegistry protocol with a dict keyed by record kind.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, schemas: tuple[RecordSchema, ...] = ()) -> None:
        """
        Initialize registry, optionally pre-loaded with schemas.

        Args:
            schemas: Schemas to register, in order

        Raises:
            DuplicateSchema: If two schemas share a record kind
        """
        self._schemas: dict[str, RecordSchema] = {}
        for schema in schemas:
            self.register(schema)

    def register(self, schema: RecordSchema) -> None:
        """Register a schema under its kind; kinds cannot be re-registered."""
        if schema.kind in self._schemas:
            raise DuplicateSchema(f"schema already registered for {schema.kind!r}")
        self._schemas[schema.kind] = schema
        logger.debug(
            "Registered schema %s with fields %s", schema.kind, ", ".join(schema.field_names)
        )

    def get(self, kind: str) -> RecordSchema:
        """Return the schema for a kind."""
        try:
            return self._schemas[kind]
        except KeyError:
            raise UnknownRecordKind(kind) from None

    def kinds(self) -> tuple[str, ...]:
        """Return registered kinds in registration order."""
        return tuple(self._schemas)


def build_default_registry() -> InMemorySchemaRegistry:
    """Create a registry holding the User and Product schemas."""
    return InMemorySchemaRegistry((USER_SCHEMA, PRODUCT_SCHEMA))
