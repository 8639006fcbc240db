"""Production environment configuration."""

import os
from typing import List

from config.base import BaseConfig
from domain.models.delivery import DeliveryChargeRules
from shared.constants import ZERO


class ProductionConfig(BaseConfig):
    """Configuration for production environment."""

    def _setup_environment(self):
        """Setup production-specific configuration."""
        self.environment = "production"
        self.debug = False

        # Production logging
        os.environ.setdefault("LOG_LEVEL", "INFO")

    def validate(self) -> List[str]:
        """Production validation also rejects tiers without a zero threshold."""
        errors = super().validate()

        if not errors:
            rules = DeliveryChargeRules.parse(self.delivery.rules_text)
            if rules.rules[-1].threshold > ZERO:
                errors.append(
                    "Delivery rules must start at threshold 0 in production "
                    "so every order has an explicit charge"
                )

        return errors
