"""Unit tests for the catalog search domain service."""

import pytest

from medistore.domain.exceptions import ValidationError
from medistore.domain.model.product import Product
from medistore.domain.model.value_objects import Money
from medistore.domain.service.catalog_search import categories, filter_products


def _catalog() -> list[Product]:
    return [
        Product(id="m1", name="Paracetamol 500mg", price=Money.of("49.99"), category="over-the-counter"),
        Product(id="m2", name="Amoxicillin 250mg", price=Money.of("299.99"), category="prescription"),
        Product(id="m3", name="Vitamin D3", price=Money.of("199.99"), category="vitamins"),
        Product(id="m4", name="Vitamin C", price=Money.of("99.00"), category="vitamins"),
    ]


class TestFilterProducts:

    def test_all_returns_everything(self):
        assert len(filter_products(_catalog())) == 4

    def test_category_filter(self):
        result = filter_products(_catalog(), category="vitamins")
        assert [p.id for p in result] == ["m3", "m4"]

    def test_search_is_case_insensitive_substring(self):
        result = filter_products(_catalog(), search="  VITAMIN d ")
        assert [p.id for p in result] == ["m3"]

    def test_category_and_search_combined(self):
        result = filter_products(_catalog(), category="prescription", search="vitamin")
        assert result == []


class TestCategories:

    def test_all_first_then_unique_in_order(self):
        assert categories(_catalog()) == ["all", "over-the-counter", "prescription", "vitamins"]


class TestProductValidation:

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            Product(id="x", name="X", price=Money.of("0"))

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product(id="x", name=" ", price=Money.of("1"))
