"""
Domain models - Pure business entities without infrastructure dependencies.

These models represent the products, delivery tiers and basket that the
pricing pipeline works on.
"""

from domain.models.product import Product
from domain.models.delivery import DeliveryChargeRule, DeliveryChargeRules
from domain.models.basket import Basket, BasketLine, BasketSummary

__all__ = [
    "Product",
    "DeliveryChargeRule",
    "DeliveryChargeRules",
    "Basket",
    "BasketLine",
    "BasketSummary",
]
