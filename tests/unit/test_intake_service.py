"""
Unit tests for IntakeService domain logic.

Tests domain logic with a mocked registry port to verify:
- Schema lookup by record kind
- Verdict reporting
- Exception raising for rejected records and unknown kinds
"""

from unittest.mock import Mock

import pytest

from src.domain.exceptions import RecordRejected, UnknownRecordKind, UnsupportedType
from src.domain.intake import IntakeService
from src.domain.ports import ViolationKind
from src.domain.records import PRODUCT_SCHEMA, USER_SCHEMA, Product, User
from src.domain.verdict import VALID, Invalid


def make_service(schema=PRODUCT_SCHEMA) -> tuple[IntakeService, Mock]:
    registry = Mock()
    registry.get.return_value = schema
    return IntakeService(registry=registry), registry


class TestCheck:
    """Tests for IntakeService.check()."""

    def test_looks_up_schema_by_kind(self, valid_product: Product) -> None:
        """check() asks the registry for the schema of the given kind."""
        service, registry = make_service()

        service.check("Product", valid_product)

        registry.get.assert_called_once_with("Product")

    def test_valid_record(self, valid_product: Product) -> None:
        """Valid record yields VALID."""
        service, _ = make_service()

        assert service.check("Product", valid_product) == VALID

    def test_invalid_record(self) -> None:
        """Invalid record yields the first violation."""
        service, _ = make_service()

        verdict = service.check("Product", Product(name="widget", price=2_000_000, stock=0))

        assert isinstance(verdict, Invalid)
        assert verdict.field == "stock"
        assert verdict.kind == ViolationKind.REQUIRED

    def test_unknown_kind_propagates(self, valid_product: Product) -> None:
        """Registry lookup failures propagate."""
        service, registry = make_service()
        registry.get.side_effect = UnknownRecordKind("Order")

        with pytest.raises(UnknownRecordKind):
            service.check("Order", valid_product)

    def test_shape_fault_propagates(self, valid_user: User) -> None:
        """Records of the wrong kind raise a fault rather than a verdict."""
        service, _ = make_service(schema=PRODUCT_SCHEMA)

        with pytest.raises(UnsupportedType):
            service.check("Product", valid_user)


class TestAccept:
    """Tests for IntakeService.accept()."""

    def test_returns_valid_record_unchanged(self, valid_user: User) -> None:
        """accept() returns the same record when valid."""
        service, _ = make_service(schema=USER_SCHEMA)

        assert service.accept("User", valid_user) is valid_user

    def test_raises_for_invalid_record(self) -> None:
        """accept() raises RecordRejected carrying the verdict."""
        service, _ = make_service(schema=USER_SCHEMA)
        user = User(name="alice", age=51, email="alice@example.com", password="secret")

        with pytest.raises(RecordRejected) as exc_info:
            service.accept("User", user)

        verdict = exc_info.value.verdict
        assert verdict.field == "age"
        assert verdict.kind == ViolationKind.ABOVE_MAXIMUM
        assert str(exc_info.value) == "age must be at most 50"

    def test_works_with_real_registry(self, registry, valid_product: Product) -> None:
        """Service accepts any SchemaRegistry implementation."""
        service = IntakeService(registry=registry)

        assert service.accept("Product", valid_product) is valid_product
