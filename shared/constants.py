"""
Application-wide constants and configuration values.

This module centralizes the default catalog, delivery tiers and offers so
that configuration, tests and the CLI share a single source of truth.
"""

from decimal import Decimal


# =================== MONETARY CONSTANTS ===================

CURRENCY_SYMBOL = "$"
CENT = Decimal("0.01")
ZERO = Decimal("0")

# Offers discount half of the unit price
HALF = Decimal("2")


# =================== DEFAULT CATALOG ===================

# (code, name, price) for the Acme Widget Co range
DEFAULT_PRODUCTS = (
    ("R01", "Red Widget", Decimal("32.95")),
    ("G01", "Green Widget", Decimal("24.95")),
    ("B01", "Blue Widget", Decimal("7.95")),
)


# =================== DELIVERY CHARGES ===================

# (threshold, charge); orders at or above a threshold pay its charge
DEFAULT_DELIVERY_RULES = (
    (Decimal("90"), Decimal("0")),
    (Decimal("50"), Decimal("2.95")),
    (Decimal("0"), Decimal("4.95")),
)


# =================== OFFERS ===================

DEFAULT_HALF_PRICE_CODES = ["R01"]


# =================== TEXT FORMATS ===================

# "90:0,50:2.95,0:4.95"
RULE_SEPARATOR = ","
RULE_FIELD_SEPARATOR = ":"

# "R01:Red Widget:32.95,G01:Green Widget:24.95"
PRODUCT_SEPARATOR = ","
PRODUCT_FIELD_SEPARATOR = ":"

DEFAULT_DELIVERY_RULES_TEXT = RULE_SEPARATOR.join(
    f"{threshold}{RULE_FIELD_SEPARATOR}{charge}"
    for threshold, charge in DEFAULT_DELIVERY_RULES
)

DEFAULT_PRODUCTS_TEXT = PRODUCT_SEPARATOR.join(
    PRODUCT_FIELD_SEPARATOR.join((code, name, str(price)))
    for code, name, price in DEFAULT_PRODUCTS
)


# =================== ENVIRONMENT VARIABLE KEYS ===================

class EnvKeys:
    """Environment variable key constants."""

    # Environment selection
    ENVIRONMENT = "BASKET_ENV"
    DEBUG = "DEBUG"

    # Catalog
    CATALOG = "BASKET_CATALOG"

    # Delivery
    DELIVERY_RULES = "BASKET_DELIVERY_RULES"

    # Offers
    HALF_PRICE_CODES = "BASKET_HALF_PRICE_CODES"
    OFFERS_ENABLED = "BASKET_OFFERS_ENABLED"

    # Logging
    LOG_LEVEL = "LOG_LEVEL"
    LOG_LEVEL_DOMAIN = "LOG_LEVEL_DOMAIN"
    LOG_LEVEL_SERVICES = "LOG_LEVEL_SERVICES"
    LOG_LEVEL_REPOSITORIES = "LOG_LEVEL_REPOSITORIES"
    LOG_LEVEL_COMMANDS = "LOG_LEVEL_COMMANDS"
