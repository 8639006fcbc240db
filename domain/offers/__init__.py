"""
Discount offers.

Offers are strategies that compute a discount from the ordered basket
contents. New promotions subclass ``Offer`` and implement ``apply``.
"""

from domain.offers.base import Offer
from domain.offers.buy_one_get_second_half_price import BuyOneGetSecondHalfPrice

__all__ = [
    "Offer",
    "BuyOneGetSecondHalfPrice",
]
