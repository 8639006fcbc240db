"""
Delivery charge domain models.

Threshold rules pair a minimum order amount with the delivery charge that
applies from that amount upward. Rule sets keep their rules sorted by
threshold, highest first, so evaluation can stop at the first match.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Iterator, Mapping, Tuple

from shared.constants import (
    DEFAULT_DELIVERY_RULES,
    RULE_FIELD_SEPARATOR,
    RULE_SEPARATOR,
)
from shared.exceptions import ConfigurationError, DataValidationError
from shared.validators import validate_decimal, validate_price


@dataclass(frozen=True)
class DeliveryChargeRule:
    """A (minimum order amount, delivery charge) pair."""

    threshold: Decimal
    charge: Decimal

    def __init__(self, threshold: Any, charge: Any):
        object.__setattr__(self, 'threshold', validate_decimal(threshold, "threshold"))
        object.__setattr__(self, 'charge', validate_price(charge, "charge"))

    @classmethod
    def coerce(cls, rule: Any) -> DeliveryChargeRule:
        """Build a rule from a rule, a {threshold, charge} mapping or a pair."""
        if isinstance(rule, DeliveryChargeRule):
            return rule

        if isinstance(rule, Mapping):
            try:
                return cls(rule["threshold"], rule["charge"])
            except KeyError as e:
                raise DataValidationError(
                    f"Delivery rule is missing {e.args[0]!r}: {dict(rule)}",
                    code="invalid_delivery_rule",
                )

        try:
            threshold, charge = rule
        except (TypeError, ValueError):
            raise DataValidationError(
                f"Delivery rule must be a (threshold, charge) pair: {rule!r}",
                code="invalid_delivery_rule",
            )
        return cls(threshold, charge)


class DeliveryChargeRules:
    """
    Ordered set of delivery charge rules.

    Rules are sorted by threshold descending at construction. The sort is
    stable, so among rules sharing a threshold the one given first is
    evaluated first.
    """

    def __init__(self, rules: Iterable[Any] = ()):
        coerced = [DeliveryChargeRule.coerce(rule) for rule in rules]
        self._rules: Tuple[DeliveryChargeRule, ...] = tuple(
            sorted(coerced, key=lambda rule: rule.threshold, reverse=True)
        )

    @classmethod
    def default(cls) -> DeliveryChargeRules:
        """
        Default Acme Widget Co rules.

        - Orders under 50: 4.95 delivery
        - Orders from 50 up to 90: 2.95 delivery
        - Orders of 90 or more: free delivery
        """
        return cls(DEFAULT_DELIVERY_RULES)

    @classmethod
    def parse(cls, text: str) -> DeliveryChargeRules:
        """
        Parse rules from text such as ``"90:0,50:2.95,0:4.95"``.

        Raises:
            ConfigurationError: If an entry is not a valid threshold:charge pair
        """
        pairs = []
        for entry in (text or "").split(RULE_SEPARATOR):
            entry = entry.strip()
            if not entry:
                continue

            parts = [part.strip() for part in entry.split(RULE_FIELD_SEPARATOR)]
            if len(parts) != 2:
                raise ConfigurationError(
                    f"Invalid delivery rule {entry!r}: expected threshold{RULE_FIELD_SEPARATOR}charge",
                    details={"rules": text},
                )
            pairs.append(tuple(parts))

        try:
            return cls(pairs)
        except DataValidationError as e:
            raise ConfigurationError(
                f"Invalid delivery rules {text!r}: {e.message}",
                details={"rules": text},
                original_exception=e,
            )

    @property
    def rules(self) -> Tuple[DeliveryChargeRule, ...]:
        """Rules sorted by threshold, highest first."""
        return self._rules

    @property
    def thresholds(self) -> Tuple[Decimal, ...]:
        return tuple(rule.threshold for rule in self._rules)

    def __iter__(self) -> Iterator[DeliveryChargeRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        body = ", ".join(f"{r.threshold}:{r.charge}" for r in self._rules)
        return f"DeliveryChargeRules([{body}])"
