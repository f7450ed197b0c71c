"""
Record kinds - User and Product submissions.

Each record kind is a frozen dataclass whose fields carry their
constraints via constrained(). The matching schemas are derived once,
at import time, so a malformed declaration fails on startup.
"""

from dataclasses import dataclass

from .constraints import RecordSchema, constrained


@dataclass(frozen=True)
class User:
    """User sign-up submission."""

    name: str = constrained(required=True, minimum="3", maximum="10")
    age: int = constrained(required=True, minimum="25", maximum="50")
    email: str = constrained(required=True, minimum="10", maximum="100")
    password: str = constrained(required=True, minimum="3", maximum="10")


@dataclass(frozen=True)
class Product:
    """New product submission."""

    name: str = constrained(required=True, minimum="3", maximum="10")
    price: int = constrained(required=True, minimum="1000000", maximum="100000000")
    stock: int = constrained(required=True, minimum="1", maximum="100")


USER_SCHEMA = RecordSchema.from_dataclass(User)
PRODUCT_SCHEMA = RecordSchema.from_dataclass(Product)
