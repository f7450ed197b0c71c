"""
Intake domain service - Validates submitted records by kind.

The service looks up the schema for a record kind through the
SchemaRegistry port and runs the validator. It holds no state besides
the injected registry, so one instance can serve concurrent requests.
"""

from dataclasses import dataclass
from typing import TypeVar

from .exceptions import RecordRejected
from .ports import SchemaRegistry
from .validator import validate
from .verdict import Invalid, Verdict

RecordT = TypeVar("RecordT")


@dataclass
class IntakeService:
    """
    Domain service for record intake.

    Resolves record kinds to schemas and reports verdicts.
    """

    registry: SchemaRegistry

    def check(self, kind: str, record: object) -> Verdict:
        """
        Validate a record against the schema registered for its kind.

        Args:
            kind: Record kind name (e.g. "Product")
            record: Record instance matching that schema

        Returns:
            Valid, or Invalid describing the first violation

        Raises:
            UnknownRecordKind: If no schema is registered for the kind
            SchemaFault: If the record shape does not match the schema
        """
        return validate(record, self.registry.get(kind))

    def accept(self, kind: str, record: RecordT) -> RecordT:
        """
        Validate a record and return it unchanged if it is valid.

        Raises:
            RecordRejected: If the record violates a constraint
        """
        verdict = self.check(kind, record)
        if isinstance(verdict, Invalid):
            raise RecordRejected(verdict)
        return record
