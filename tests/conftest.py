"""Shared fixtures: the Acme Widget Co catalog, default delivery tiers and red widget offer."""

import pytest

from domain.models.basket import Basket
from domain.models.delivery import DeliveryChargeRules
from domain.models.product import Product
from domain.offers import BuyOneGetSecondHalfPrice
from repositories.product_catalog import ProductCatalog
from services.domain.delivery_charge_calculator import DeliveryChargeCalculator


@pytest.fixture
def red_widget():
    return Product(code="R01", name="Red Widget", price="32.95")


@pytest.fixture
def green_widget():
    return Product(code="G01", name="Green Widget", price="24.95")


@pytest.fixture
def blue_widget():
    return Product(code="B01", name="Blue Widget", price="7.95")


@pytest.fixture
def catalog(red_widget, green_widget, blue_widget):
    return ProductCatalog([red_widget, green_widget, blue_widget])


@pytest.fixture
def delivery_calculator():
    return DeliveryChargeCalculator(DeliveryChargeRules.default())


@pytest.fixture
def offers():
    return [BuyOneGetSecondHalfPrice("R01")]


@pytest.fixture
def basket(catalog, delivery_calculator, offers):
    return Basket(catalog=catalog, delivery_calculator=delivery_calculator, offers=offers)


@pytest.fixture
def basket_no_offers(catalog, delivery_calculator):
    return Basket(catalog=catalog, delivery_calculator=delivery_calculator)
