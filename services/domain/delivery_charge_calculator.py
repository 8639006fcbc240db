"""
Delivery charge calculation.

Evaluates threshold rules against an order amount: the first rule, highest
threshold first, whose threshold the amount reaches sets the charge.
"""

from __future__ import annotations
from decimal import Decimal
from typing import Any, Optional
import logging

from domain.models.delivery import DeliveryChargeRules
from domain.value_objects.money import to_money
from shared.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class DeliveryChargeCalculator:
    """
    Threshold-based delivery charge calculator.

    Examples with the default rules:
        calculate(Decimal("45.00"))  -> Decimal("4.95")
        calculate(Decimal("50.00"))  -> Decimal("2.95")
        calculate(Decimal("90.00"))  -> Decimal("0")
    """

    def __init__(self, rules: Optional[DeliveryChargeRules] = None):
        if rules is None:
            rules = DeliveryChargeRules.default()

        if not len(rules):
            raise ConfigurationError(
                "Delivery charge calculator needs at least one rule",
                code="empty_delivery_rules",
            )

        self.rules = rules

    def calculate(self, amount: Any) -> Decimal:
        """
        Delivery charge for an order amount (after discounts).

        The threshold comparison is inclusive. Amounts below every threshold
        fall back to the lowest-threshold rule's charge.
        """
        amount = to_money(amount, "order amount")

        for rule in self.rules.rules:
            if amount >= rule.threshold:
                charge = rule.charge
                break
        else:
            charge = self.rules.rules[-1].charge
            logger.debug(f"Amount {amount} below every threshold; using fallback charge")

        logger.debug(f"Delivery charge for {amount}: {charge}")
        return charge

    def __repr__(self) -> str:
        return f"DeliveryChargeCalculator({self.rules!r})"
