"""
Validation verdicts - The validator's result values.

A verdict is either Valid or Invalid. Invalid names the offending field,
the violated constraint, and the configured bound; exactly one is ever
reported per validation call.
"""

from dataclasses import dataclass

from .ports import ViolationKind


@dataclass(frozen=True)
class Valid:
    """Every field satisfied its constraints."""

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """
    First constraint violation found.

    Attributes:
        field: Schema name of the offending field
        kind: Violated constraint
        bound: Configured bound that was violated (None for REQUIRED)
        message: Human-readable reason, e.g. "name must be at least 3 characters long"
    """

    field: str
    kind: ViolationKind
    bound: int | None
    message: str

    @property
    def ok(self) -> bool:
        return False


Verdict = Valid | Invalid

VALID = Valid()
