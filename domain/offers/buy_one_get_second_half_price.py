"""Buy one, get the second half price."""

from __future__ import annotations
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Sequence
import logging

from domain.offers.base import Offer
from domain.value_objects.money import sum_money
from shared.constants import HALF
from shared.validators import validate_product_code

if TYPE_CHECKING:
    from domain.models.basket import BasketLine

logger = logging.getLogger(__name__)


class BuyOneGetSecondHalfPrice(Offer):
    """
    Half price on every second matching item.

    Matching lines are taken in basket order; the 2nd, 4th, 6th... of them
    are discounted by half their unit price. With four red widgets, items 2
    and 4 get the discount. Other products in between do not affect the
    count.
    """

    def __init__(self, product_code: Any):
        self.product_code = validate_product_code(product_code)

    @property
    def description(self) -> str:
        return f"Buy one {self.product_code}, get the second half price"

    def apply(self, items: Sequence[BasketLine]) -> Decimal:
        matching = [item for item in items if item.product.code == self.product_code]

        discount = sum_money(
            item.product.price / HALF
            for position, item in enumerate(matching, start=1)
            if position % 2 == 0
        )

        if discount:
            logger.debug(
                f"{self.product_code}: {len(matching)} matching items, discount {discount}"
            )
        return discount

    def __repr__(self) -> str:
        return f"BuyOneGetSecondHalfPrice(product_code='{self.product_code}')"
