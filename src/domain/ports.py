"""
Port interfaces - Protocol definitions and shared enums.

This module defines the closed vocabularies the validator dispatches on
and the interface (port) the domain requires for schema lookup.
Adapters implement these protocols.
"""

from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .constraints import RecordSchema


class FieldType(str, Enum):
    """
    Semantic type of a record field.

    The set is closed: the validator handles exactly these two variants.
    - STRING: min/max bound character length
    - INTEGER: min/max bound numeric value
    """

    STRING = "string"
    INTEGER = "integer"


class ViolationKind(str, Enum):
    """
    Constraint that an Invalid verdict reports as violated.

    Uses str mixin so values serialize directly into JSON responses.
    """

    REQUIRED = "required"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    BELOW_MINIMUM = "below_minimum"
    ABOVE_MAXIMUM = "above_maximum"


class SchemaRegistry(Protocol):
    """Port interface for record schema lookup."""

    def register(self, schema: "RecordSchema") -> None:
        """
        Register a schema under its record kind.

        Args:
            schema: Fully defined, immutable record schema

        Raises:
            DuplicateSchema: If the kind is already registered
        """
        ...

    def get(self, kind: str) -> "RecordSchema":
        """
        Look up the schema for a record kind.

        Args:
            kind: Record kind name (e.g. "User")

        Returns:
            The registered RecordSchema

        Raises:
            UnknownRecordKind: If no schema is registered for the kind
        """
        ...

    def kinds(self) -> tuple[str, ...]:
        """Return registered record kinds in registration order."""
        ...
