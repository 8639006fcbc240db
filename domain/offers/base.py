"""
Offer strategy base class.

Offers are pluggable discount strategies evaluated against the full ordered
basket contents. Each concrete offer implements ``apply``; the abstract base
cannot be instantiated, so an offer without a strategy never reaches a
basket.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Sequence

from shared.validators import normalize_product_code

if TYPE_CHECKING:
    from domain.models.basket import BasketLine


class Offer(ABC):
    """Base class for discount offers."""

    @abstractmethod
    def apply(self, items: Sequence[BasketLine]) -> Decimal:
        """
        Calculate the discount this offer grants on the given items.

        Implementations must be pure: read the items, never mutate them, and
        return a non-negative Decimal.
        """

    @property
    def description(self) -> str:
        return self.__class__.__name__

    @staticmethod
    def count_items_by_code(items: Sequence[BasketLine], code: Any) -> int:
        """Count basket lines whose product code matches ``code``."""
        code = normalize_product_code(code)
        return sum(1 for item in items if item.product.code == code)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
