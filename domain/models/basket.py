"""
Basket domain models.

The basket is an ordered, append-only list of lines bound to a catalog, a
delivery calculator and a set of offers. Its total is recomputed from the
current lines on every call.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Iterable, List, Tuple
import logging

from domain.models.product import Product
from domain.value_objects.money import sum_money, truncate_to_cents
from shared.exceptions import ProductNotFoundError

if TYPE_CHECKING:
    from domain.offers.base import Offer
    from repositories.product_catalog import ProductCatalog
    from services.domain.delivery_charge_calculator import DeliveryChargeCalculator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BasketLine:
    """One added unit of a product."""
    product: Product
    quantity: int = 1

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class BasketSummary:
    """Price breakdown of a basket at one point in time."""
    subtotal: Decimal
    discount: Decimal
    delivery: Decimal
    total: Decimal

    @property
    def discounted_subtotal(self) -> Decimal:
        return self.subtotal - self.discount


class Basket:
    """
    Shopping basket for a single checkout.

    Example:
        basket = Basket(catalog, DeliveryChargeCalculator(), [BuyOneGetSecondHalfPrice("R01")])
        basket.add("R01")
        basket.add("G01")
        basket.total()  -> Decimal("60.85")
    """

    def __init__(
        self,
        catalog: ProductCatalog,
        delivery_calculator: DeliveryChargeCalculator,
        offers: Iterable[Offer] = ()
    ):
        self._catalog = catalog
        self._delivery_calculator = delivery_calculator
        self._offers: Tuple[Offer, ...] = tuple(offers)
        self._items: List[BasketLine] = []

    def add(self, product_code: Any) -> None:
        """
        Add one unit of a product by code (case-insensitive).

        Raises:
            ProductNotFoundError: If the code is not in the catalog; the
                basket is left unchanged
        """
        product = self._catalog.find(product_code)
        if product is None:
            logger.warning(f"Rejected unknown product code: {product_code!r}")
            raise ProductNotFoundError(product_code)

        self._items.append(BasketLine(product))
        logger.debug(f"Added {product.code}; basket has {len(self._items)} items")

    @property
    def items(self) -> Tuple[BasketLine, ...]:
        """Snapshot of the lines in insertion order."""
        return tuple(self._items)

    @property
    def offers(self) -> Tuple[Offer, ...]:
        return self._offers

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def subtotal(self) -> Decimal:
        """Sum of line prices before discount and delivery."""
        return sum_money(item.line_total for item in self._items)

    def discount(self) -> Decimal:
        """
        Sum of every offer's discount.

        Each offer sees the same undiscounted lines and the results are added
        without clamping to the subtotal.
        """
        items = self.items
        return sum_money(offer.apply(items) for offer in self._offers)

    def summary(self) -> BasketSummary:
        """Compute subtotal, discount, delivery and the truncated total."""
        subtotal = self.subtotal()
        discount = self.discount()
        delivery = self._delivery_calculator.calculate(subtotal - discount)
        total = truncate_to_cents(subtotal - discount + delivery)

        logger.debug(
            f"Basket of {len(self._items)} items: subtotal {subtotal}, "
            f"discount {discount}, delivery {delivery}, total {total}"
        )
        return BasketSummary(subtotal, discount, delivery, total)

    def total(self) -> Decimal:
        """Final price, truncated (never rounded up) to two decimal places."""
        return self.summary().total

    def __repr__(self) -> str:
        codes = ", ".join(item.product.code for item in self._items)
        return f"Basket([{codes}])"
