"""
Constraint schema - Typed, immutable descriptions of record kinds.

A RecordSchema is an ordered sequence of FieldDescriptors, each carrying
a FieldType and a Constraints set. Schemas are built once, at definition
time, either explicitly with string_field()/integer_field() or
declaratively from a dataclass whose fields use constrained().

All bound metadata is parsed here. Anything that cannot become a valid
bound raises MalformedBound before a single record is evaluated, so the
validator only ever sees well-formed integers or None.
"""

import dataclasses
import re
import typing
from dataclasses import dataclass

from .exceptions import MalformedBound, SchemaFault, UnsupportedType
from .ports import FieldType

_METADATA_KEY = "structguard"
_INTEGER_TEXT = re.compile(r"^[+-]?\d+$")
_PYTHON_TYPES = {str: FieldType.STRING, int: FieldType.INTEGER}

RawBound = int | str | None


@dataclass(frozen=True)
class Constraints:
    """
    Constraint set for one field.

    None means "no bound" and is distinct from a bound of 0.
    """

    required: bool = False
    min: int | None = None
    max: int | None = None

    @property
    def has_bounds(self) -> bool:
        """Whether bound checks run at all (either bound set and positive)."""
        return (self.min is not None and self.min > 0) or (self.max is not None and self.max > 0)


@dataclass(frozen=True)
class FieldDescriptor:
    """A named, typed field and its constraints."""

    name: str
    type: FieldType
    constraints: Constraints = Constraints()

    def __post_init__(self) -> None:
        if not isinstance(self.type, FieldType):
            raise UnsupportedType(self.name, f"unsupported field type {self.type!r}")


@dataclass(frozen=True)
class RecordSchema:
    """
    Ordered, immutable field descriptors for one record kind.

    Field order is the order in which the validator checks fields.
    """

    kind: str
    fields: tuple[FieldDescriptor, ...]

    def __post_init__(self) -> None:
        if not self.kind:
            raise SchemaFault("record kind must not be empty")
        # Accept any iterable at construction, store a tuple
        object.__setattr__(self, "fields", tuple(self.fields))
        seen: set[str] = set()
        for descriptor in self.fields:
            if not isinstance(descriptor, FieldDescriptor):
                raise SchemaFault(f"{self.kind}: expected FieldDescriptor, got {descriptor!r}")
            if descriptor.name in seen:
                raise SchemaFault(f"{self.kind}: duplicate field {descriptor.name!r}")
            seen.add(descriptor.name)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(descriptor.name for descriptor in self.fields)

    @classmethod
    def from_dataclass(cls, record_type: type, kind: str | None = None) -> "RecordSchema":
        """
        Build a schema from a dataclass declaration.

        Fields are taken in declaration order. Constraint metadata attached
        with constrained() is parsed here; fields without it are
        unconstrained.

        Args:
            record_type: Dataclass whose fields are annotated str or int
            kind: Record kind name (defaults to the class name)

        Returns:
            RecordSchema describing the dataclass

        Raises:
            UnsupportedType: If the class is not a dataclass or a field is
                annotated with anything other than str or int
            MalformedBound: If a min/max annotation cannot be parsed
        """
        kind = kind or record_type.__name__
        if not (dataclasses.is_dataclass(record_type) and isinstance(record_type, type)):
            raise UnsupportedType(kind, f"expected dataclass, got {record_type!r}")

        hints = typing.get_type_hints(record_type)
        descriptors = []
        for dc_field in dataclasses.fields(record_type):
            hint = hints.get(dc_field.name)
            field_type = _PYTHON_TYPES.get(hint)
            if field_type is None:
                raise UnsupportedType(dc_field.name, f"unsupported field type {hint!r}")

            raw = dc_field.metadata.get(_METADATA_KEY, {})
            descriptors.append(
                _describe(
                    dc_field.name,
                    field_type,
                    required=raw.get("required", False),
                    minimum=raw.get("min"),
                    maximum=raw.get("max"),
                )
            )
        return cls(kind=kind, fields=tuple(descriptors))


def constrained(
    *, required: bool = False, minimum: RawBound = None, maximum: RawBound = None
) -> typing.Any:
    """
    Attach constraints to a dataclass field.

    Bounds may be given as integers or as decimal text (annotation style,
    e.g. "25"). They are parsed by RecordSchema.from_dataclass().
    """
    return dataclasses.field(
        metadata={_METADATA_KEY: {"required": required, "min": minimum, "max": maximum}}
    )


def string_field(
    name: str, *, required: bool = False, minimum: RawBound = None, maximum: RawBound = None
) -> FieldDescriptor:
    """Describe a string field whose bounds limit character length."""
    return _describe(name, FieldType.STRING, required=required, minimum=minimum, maximum=maximum)


def integer_field(
    name: str, *, required: bool = False, minimum: RawBound = None, maximum: RawBound = None
) -> FieldDescriptor:
    """Describe an integer field whose bounds limit the numeric value."""
    return _describe(name, FieldType.INTEGER, required=required, minimum=minimum, maximum=maximum)


def parse_bound(field_name: str, bound_name: str, raw: object) -> int | None:
    """
    Parse one min/max annotation into an optional integer bound.

    None and empty text mean "unset". Integers pass through; text must be
    an optionally signed run of decimal digits (surrounding whitespace is
    ignored). Everything else is malformed.

    Raises:
        MalformedBound: If the value cannot be parsed
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise MalformedBound(field_name, bound_name, raw, "booleans are not bounds")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        if not _INTEGER_TEXT.match(text):
            raise MalformedBound(field_name, bound_name, raw, "not an integer")
        return int(text)
    raise MalformedBound(field_name, bound_name, raw, f"unsupported type {type(raw).__name__}")


def _describe(
    name: str,
    field_type: FieldType,
    *,
    required: bool,
    minimum: RawBound,
    maximum: RawBound,
) -> FieldDescriptor:
    if not isinstance(required, bool):
        raise SchemaFault(f"{name}: required must be a bool, got {required!r}")

    low = parse_bound(name, "min", minimum)
    high = parse_bound(name, "max", maximum)

    if field_type is FieldType.STRING:
        # A length can never be negative
        if low is not None and low < 0:
            raise MalformedBound(name, "min", minimum, "negative length")
        if high is not None and high < 0:
            raise MalformedBound(name, "max", maximum, "negative length")
    if low is not None and high is not None and low > high:
        raise MalformedBound(name, "min", minimum, f"greater than max {high}")

    return FieldDescriptor(
        name=name,
        type=field_type,
        constraints=Constraints(required=required, min=low, max=high),
    )
