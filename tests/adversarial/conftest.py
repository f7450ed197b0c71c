"""
Shared fixtures for adversarial tests.

Provides record corpora for concurrency and oversized-input tests.
"""

import pytest

from src.domain.records import PRODUCT_SCHEMA, Product
from src.domain.validator import validate

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture(scope="module")
def product_corpus() -> list[Product]:
    """Products with varied name lengths, prices and stock levels."""
    products = []
    for i in range(200):
        products.append(
            Product(
                name="x" * (i % 14),
                price=(i * 997_331) % 120_000_000,
                stock=(i * 7) % 130 - 10,
            )
        )
    return products


@pytest.fixture(scope="module")
def expected_verdicts(product_corpus: list[Product]) -> list:
    """Verdicts computed sequentially, used as the reference."""
    return [validate(product, PRODUCT_SCHEMA) for product in product_corpus]
