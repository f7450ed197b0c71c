"""
Domain exceptions - Semantic error types for record validation.

Two families live here. Schema faults are programmer errors in a schema
definition and are raised loudly, at definition time where possible.
Record rejections carry a validation verdict for callers that prefer
exceptions over inspecting the verdict value.
"""


class StructGuardError(Exception):
    """Base class for validation domain errors."""

    pass


class SchemaFault(StructGuardError):
    """A schema or record shape is malformed (configuration fault)."""

    pass


class UnsupportedType(SchemaFault):
    """Field type or record shape outside the supported string/integer set."""

    def __init__(self, field_name: str, detail: str) -> None:
        super().__init__(f"{field_name}: {detail}")
        self.field_name = field_name
        self.detail = detail


class MalformedBound(SchemaFault):
    """A min/max constraint cannot be parsed as a valid bound."""

    def __init__(self, field_name: str, bound_name: str, raw: object, detail: str) -> None:
        super().__init__(f"invalid {bound_name} value for {field_name}: {raw!r} ({detail})")
        self.field_name = field_name
        self.bound_name = bound_name
        self.raw = raw


class DuplicateSchema(SchemaFault):
    """A schema is already registered for this record kind."""

    pass


class UnknownRecordKind(StructGuardError):
    """No schema is registered for the requested record kind."""

    pass


class RecordRejected(StructGuardError):
    """A record failed validation; carries the Invalid verdict."""

    def __init__(self, verdict) -> None:
        super().__init__(verdict.message)
        self.verdict = verdict
