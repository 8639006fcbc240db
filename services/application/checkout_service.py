"""
Checkout Service - wires catalog, delivery rules and offers from configuration.

This application service turns a configuration instance into ready-to-use
pricing collaborators and hands out baskets bound to them. The collaborators
are built once and shared read-only by every basket.
"""

from __future__ import annotations
from typing import Iterable, List, Tuple
import logging

from config.base import BaseConfig
from domain.models.basket import Basket, BasketSummary
from domain.models.delivery import DeliveryChargeRules
from domain.offers import BuyOneGetSecondHalfPrice, Offer
from repositories.product_catalog import ProductCatalog
from services.domain.delivery_charge_calculator import DeliveryChargeCalculator
from shared.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class CheckoutService:
    """
    Entry point for pricing baskets with a configured catalog and offers.

    Example:
        service = CheckoutService.from_config(get_config())
        service.price(["R01", "R01"]).total  -> Decimal("54.37")
    """

    def __init__(
        self,
        catalog: ProductCatalog,
        delivery_calculator: DeliveryChargeCalculator,
        offers: Iterable[Offer] = ()
    ):
        self.catalog = catalog
        self.delivery_calculator = delivery_calculator
        self.offers: Tuple[Offer, ...] = tuple(offers)

    @classmethod
    def from_config(cls, config: BaseConfig) -> CheckoutService:
        """
        Build the service from configuration.

        Raises:
            ConfigurationError: If catalog, rules or offers are misconfigured
        """
        errors = config.validate()
        if errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(errors)}",
                details={"errors": errors, "environment": config.environment}
            )

        catalog = ProductCatalog.parse(config.catalog.products_text)
        rules = DeliveryChargeRules.parse(config.delivery.rules_text)
        offers = cls._build_offers(config)

        logger.info(
            f"Checkout ready: {len(catalog)} products, {len(rules)} delivery tiers, "
            f"{len(offers)} offers ({config.environment})"
        )
        return cls(catalog, DeliveryChargeCalculator(rules), offers)

    @staticmethod
    def _build_offers(config: BaseConfig) -> List[Offer]:
        if not config.offers.enabled:
            return []
        return [BuyOneGetSecondHalfPrice(code) for code in config.offers.half_price_codes]

    def new_basket(self) -> Basket:
        """Create an empty basket bound to this service's collaborators."""
        return Basket(self.catalog, self.delivery_calculator, self.offers)

    def price(self, product_codes: Iterable[str]) -> BasketSummary:
        """
        Add every code to a basket and return its price breakdown.

        Raises:
            ProductNotFoundError: On the first unknown code
        """
        basket = self.new_basket()
        for code in product_codes:
            basket.add(code)
        return basket.summary()
