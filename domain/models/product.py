"""
Product domain model.

A product is identified by its code alone: two products with the same code
are the same product for equality and hashing, whatever their name or price.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from shared.validators import validate_price, validate_product_code


@dataclass(frozen=True, eq=False)
class Product:
    """
    Immutable catalog product.

    Examples:
        Product("r01", "Red Widget", "32.95").code  -> "R01"
        Product("R01", "Red Widget", 32.95).price   -> Decimal("32.95")
    """

    code: str
    name: str
    price: Decimal

    def __init__(self, code: Any, name: str, price: Any):
        """
        Create Product with validation and normalization.

        Args:
            code: Product code (trimmed and uppercased)
            name: Display name
            price: Unit price, converted to an exact Decimal

        Raises:
            DataValidationError: If the code is empty or the price invalid
        """
        object.__setattr__(self, 'code', validate_product_code(code))
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'price', validate_price(price))

    def __eq__(self, other) -> bool:
        """Products are equal when their codes are equal."""
        if not isinstance(other, Product):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash on code only, matching __eq__."""
        return hash(self.code)

    def __str__(self) -> str:
        return f"{self.code} {self.name}"

    def __repr__(self) -> str:
        return f"Product(code='{self.code}', name='{self.name}', price={self.price})"
