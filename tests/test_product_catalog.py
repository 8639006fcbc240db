from decimal import Decimal
from enum import Enum

import pytest

from domain.models.product import Product
from repositories.product_catalog import ProductCatalog
from shared.exceptions import ConfigurationError


class Code(Enum):
    RED = "R01"


def test_empty_catalog():
    catalog = ProductCatalog()

    assert catalog.all() == []
    assert len(catalog) == 0


def test_catalog_with_products(red_widget, green_widget):
    catalog = ProductCatalog([red_widget, green_widget])

    assert len(catalog.all()) == 2
    assert catalog.all() == [red_widget, green_widget]


def test_duplicate_codes_keep_last_product(red_widget):
    duplicate = Product(code="r01", name="Another Red", price=50)
    catalog = ProductCatalog([red_widget, duplicate])

    found = catalog.find("R01")
    assert found.name == "Another Red"
    assert found.price == Decimal("50")
    assert len(catalog) == 1


@pytest.mark.parametrize("code", ["R01", "r01", "  r01 ", Code.RED])
def test_find_is_case_insensitive(catalog, red_widget, code):
    assert catalog.find(code) == red_widget


def test_find_lowercase_and_uppercase_agree(catalog):
    assert catalog.find("r01") is catalog.find("R01")


@pytest.mark.parametrize("code", ["INVALID", "", None])
def test_find_missing_code_returns_none(catalog, code):
    assert catalog.find(code) is None


def test_contains_and_codes(catalog):
    assert "b01" in catalog
    assert "X99" not in catalog
    assert catalog.codes() == ["R01", "G01", "B01"]


def test_parse_catalog_text():
    catalog = ProductCatalog.parse("R01:Red Widget:32.95, b01:Blue Widget:7.95")

    assert catalog.codes() == ["R01", "B01"]
    assert catalog.find("B01").price == Decimal("7.95")
    assert catalog.find("R01").name == "Red Widget"


def test_parse_empty_text_gives_empty_catalog():
    assert len(ProductCatalog.parse("")) == 0


@pytest.mark.parametrize("text", ["R01:Red Widget", "R01:Red Widget:abc", ":Nameless:1"])
def test_parse_rejects_malformed_entries(text):
    with pytest.raises(ConfigurationError):
        ProductCatalog.parse(text)
