"""
Base configuration class with all application settings.

Settings are read from environment variables once per configuration
instance; the defaults reproduce the Acme Widget Co catalog, delivery tiers
and red widget offer.
"""

import os
from dataclasses import dataclass, field
from typing import List

from domain.models.delivery import DeliveryChargeRules
from repositories.product_catalog import ProductCatalog
from shared.constants import (
    DEFAULT_DELIVERY_RULES_TEXT,
    DEFAULT_HALF_PRICE_CODES,
    DEFAULT_PRODUCTS_TEXT,
    EnvKeys,
)
from shared.exceptions import ConfigurationError
from shared.validators import validate_product_codes


def _get_bool(name: str, default: bool) -> bool:
    """Parse boolean environment variable."""
    val = os.getenv(name)
    if val is None:
        return default
    v = val.strip().lower()
    return v in ("1", "true", "yes", "on")


def _get_list(name: str, default: List[str] = None, separator: str = ",") -> List[str]:
    """Parse comma-separated list environment variable."""
    if default is None:
        default = []

    val = os.getenv(name, "")
    if not val.strip():
        return default

    return [item.strip() for item in val.split(separator) if item.strip()]


@dataclass
class CatalogConfig:
    """Product catalog configuration."""
    products_text: str = DEFAULT_PRODUCTS_TEXT

    @classmethod
    def from_env(cls) -> 'CatalogConfig':
        return cls(
            products_text=os.getenv(EnvKeys.CATALOG, DEFAULT_PRODUCTS_TEXT).strip(),
        )


@dataclass
class DeliveryConfig:
    """Delivery charge tiers as threshold:charge pairs."""
    rules_text: str = DEFAULT_DELIVERY_RULES_TEXT

    @classmethod
    def from_env(cls) -> 'DeliveryConfig':
        return cls(
            rules_text=os.getenv(EnvKeys.DELIVERY_RULES, DEFAULT_DELIVERY_RULES_TEXT).strip(),
        )


@dataclass
class OfferConfig:
    """Special offer configuration."""
    enabled: bool = True
    half_price_codes: List[str] = field(default_factory=lambda: list(DEFAULT_HALF_PRICE_CODES))

    @classmethod
    def from_env(cls) -> 'OfferConfig':
        return cls(
            enabled=_get_bool(EnvKeys.OFFERS_ENABLED, True),
            half_price_codes=validate_product_codes(
                _get_list(EnvKeys.HALF_PRICE_CODES, list(DEFAULT_HALF_PRICE_CODES))
            ),
        )


class BaseConfig:
    """
    Base configuration class that consolidates all application settings.

    Subclasses adjust settings per environment in ``_setup_environment``.
    """

    def __init__(self):
        # Core app configuration
        self.app_name: str = "Acme Widget Co"
        self.app_version: str = "1.0.0"
        self.debug: bool = _get_bool(EnvKeys.DEBUG, False)
        self.environment: str = os.getenv(EnvKeys.ENVIRONMENT, "development")

        # Configuration groups
        self.catalog = CatalogConfig.from_env()
        self.delivery = DeliveryConfig.from_env()
        self.offers = OfferConfig.from_env()

        # Initialize environment-specific settings
        self._setup_environment()

    def _setup_environment(self):
        """Setup environment-specific configuration. Override in subclasses."""
        pass

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() in ("development", "dev")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() in ("production", "prod")

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment.lower() in ("testing", "test")

    def validate(self) -> List[str]:
        """
        Validate configuration and return list of validation errors.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        try:
            catalog = ProductCatalog.parse(self.catalog.products_text)
        except ConfigurationError as e:
            errors.append(e.message)
            catalog = None

        if catalog is not None and not len(catalog):
            errors.append(f"{EnvKeys.CATALOG} must define at least one product")

        try:
            rules = DeliveryChargeRules.parse(self.delivery.rules_text)
        except ConfigurationError as e:
            errors.append(e.message)
        else:
            if not len(rules):
                errors.append(f"{EnvKeys.DELIVERY_RULES} must define at least one rule")

        if catalog is not None and self.offers.enabled:
            for code in self.offers.half_price_codes:
                if code not in catalog:
                    errors.append(
                        f"{EnvKeys.HALF_PRICE_CODES} references unknown product {code}"
                    )

        return errors
