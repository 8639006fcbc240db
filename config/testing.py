"""Testing environment configuration."""

import os
from config.base import BaseConfig, CatalogConfig, DeliveryConfig, OfferConfig


class TestingConfig(BaseConfig):
    """Configuration for testing environment."""

    def _setup_environment(self):
        """Pin the default Acme setup so tests never depend on the shell environment."""
        self.environment = "testing"
        self.debug = True

        self.catalog = CatalogConfig()
        self.delivery = DeliveryConfig()
        self.offers = OfferConfig()

        os.environ.setdefault("LOG_LEVEL", "DEBUG")
