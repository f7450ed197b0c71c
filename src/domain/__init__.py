"""
Domain layer - Pure validation logic with zero framework imports.

This package contains the constraint schema model, the fail-fast record
validator, the record kinds served by the API, and the intake service.
It defines its own port interfaces for infrastructure abstraction.
"""

from .constraints import (
    Constraints,
    FieldDescriptor,
    RecordSchema,
    constrained,
    integer_field,
    parse_bound,
    string_field,
)
from .exceptions import (
    DuplicateSchema,
    MalformedBound,
    RecordRejected,
    SchemaFault,
    StructGuardError,
    UnknownRecordKind,
    UnsupportedType,
)
from .intake import IntakeService
from .ports import FieldType, SchemaRegistry, ViolationKind
from .records import PRODUCT_SCHEMA, USER_SCHEMA, Product, User
from .validator import validate
from .verdict import VALID, Invalid, Valid, Verdict

__all__ = [
    "Constraints",
    "DuplicateSchema",
    "FieldDescriptor",
    "FieldType",
    "IntakeService",
    "Invalid",
    "MalformedBound",
    "PRODUCT_SCHEMA",
    "Product",
    "RecordRejected",
    "RecordSchema",
    "SchemaFault",
    "SchemaRegistry",
    "StructGuardError",
    "USER_SCHEMA",
    "UnknownRecordKind",
    "UnsupportedType",
    "User",
    "VALID",
    "Valid",
    "Verdict",
    "ViolationKind",
    "constrained",
    "integer_field",
    "parse_bound",
    "string_field",
    "validate",
]
