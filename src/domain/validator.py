"""
Constraint validator - Fail-fast validation of flat records.

validate() walks a RecordSchema in declaration order and returns on the
first violation. Per field it runs the required check, then the bound
checks, dispatching on the closed FieldType set.

Required semantics (inherited)
==============================
A required string fails when empty. A required integer fails when it is
zero or negative, so a genuine 0 cannot be told apart from "absent".
This is kept for compatibility with existing clients.

Bound gate
==========
Bound checks run only when min or max is set and positive. Within the
gate each bound is checked only if it is set.
"""

import dataclasses
from collections.abc import Mapping

from .constraints import FieldDescriptor, RecordSchema
from .exceptions import UnsupportedType
from .ports import FieldType, ViolationKind
from .verdict import VALID, Invalid, Verdict


def validate(record: object, schema: RecordSchema) -> Verdict:
    """
    Validate a record against its schema.

    Args:
        record: Dataclass instance or mapping whose fields match the schema
            1:1 by name, holding str or int values
        schema: Record schema (fields checked in declaration order)

    Returns:
        VALID, or Invalid describing the first violation

    Raises:
        UnsupportedType: If the record is not a flat dataclass/mapping
            matching the schema, or a value has the wrong Python type
    """
    read = _field_reader(record, schema)

    for descriptor in schema.fields:
        value = read(descriptor.name)
        if descriptor.type is FieldType.STRING:
            verdict = _check_string(descriptor, value)
        elif descriptor.type is FieldType.INTEGER:
            verdict = _check_integer(descriptor, value)
        else:
            raise UnsupportedType(descriptor.name, f"unsupported field type {descriptor.type!r}")
        if verdict is not None:
            return verdict

    return VALID


def _field_reader(record: object, schema: RecordSchema):
    """Return a name -> value accessor after checking the record's shape."""
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        names = tuple(f.name for f in dataclasses.fields(record))
        _check_names(schema, names)
        return lambda name: getattr(record, name)
    if isinstance(record, Mapping):
        _check_names(schema, tuple(record.keys()))
        return record.__getitem__
    raise UnsupportedType(schema.kind, f"expected dataclass or mapping, got {type(record).__name__}")


def _check_names(schema: RecordSchema, names: tuple) -> None:
    expected = set(schema.field_names)
    actual = set(names)
    missing = [name for name in schema.field_names if name not in actual]
    if missing:
        raise UnsupportedType(schema.kind, f"record is missing fields {missing}")
    extra = sorted(str(name) for name in actual - expected)
    if extra:
        raise UnsupportedType(schema.kind, f"record has undeclared fields {extra}")


def _check_string(descriptor: FieldDescriptor, value: object) -> Invalid | None:
    if not isinstance(value, str):
        raise UnsupportedType(descriptor.name, f"expected str, got {type(value).__name__}")

    name = descriptor.name
    constraints = descriptor.constraints

    if constraints.required and value == "":
        return _required(name)

    if constraints.has_bounds:
        length = len(value)
        if constraints.min is not None and length < constraints.min:
            return Invalid(
                field=name,
                kind=ViolationKind.TOO_SHORT,
                bound=constraints.min,
                message=f"{name} must be at least {constraints.min} characters long",
            )
        if constraints.max is not None and length > constraints.max:
            return Invalid(
                field=name,
                kind=ViolationKind.TOO_LONG,
                bound=constraints.max,
                message=f"{name} must be at most {constraints.max} characters long",
            )
    return None


def _check_integer(descriptor: FieldDescriptor, value: object) -> Invalid | None:
    # bool is an int subclass but never a valid integer field value
    if isinstance(value, bool) or not isinstance(value, int):
        raise UnsupportedType(descriptor.name, f"expected int, got {type(value).__name__}")

    name = descriptor.name
    constraints = descriptor.constraints

    if constraints.required and value <= 0:
        return _required(name)

    if constraints.has_bounds:
        if constraints.min is not None and value < constraints.min:
            return Invalid(
                field=name,
                kind=ViolationKind.BELOW_MINIMUM,
                bound=constraints.min,
                message=f"{name} must be at least {constraints.min}",
            )
        if constraints.max is not None and value > constraints.max:
            return Invalid(
                field=name,
                kind=ViolationKind.ABOVE_MAXIMUM,
                bound=constraints.max,
                message=f"{name} must be at most {constraints.max}",
            )
    return None


def _required(name: str) -> Invalid:
    return Invalid(field=name, kind=ViolationKind.REQUIRED, bound=None, message=f"{name} is required")
