"""Configuration schema validation and documentation."""

from typing import Dict, Any, List
from dataclasses import MISSING, fields

from config.base import CatalogConfig, DeliveryConfig, OfferConfig
from shared.constants import EnvKeys


def generate_config_schema() -> Dict[str, Any]:
    """
    Generate a schema dictionary describing all configuration options.

    Returns:
        Dictionary with configuration schema for documentation
    """
    schema = {
        "meta": {
            "title": "Acme Basket Configuration Schema",
            "description": "Environment variables and settings for basket pricing",
            "version": "1.0.0"
        },
        "environments": {
            "development": "Development environment with debug logging",
            "production": "Production environment with strict validation",
            "testing": "Testing environment pinned to the default Acme setup"
        },
        "sections": {}
    }

    config_classes = [
        ("catalog", CatalogConfig),
        ("delivery", DeliveryConfig),
        ("offers", OfferConfig),
    ]

    for section_name, config_class in config_classes:
        section_schema = {
            "description": config_class.__doc__ or f"{section_name.title()} configuration",
            "fields": {}
        }

        for field in fields(config_class):
            if field.default is not MISSING:
                default = field.default
            elif field.default_factory is not MISSING:
                default = field.default_factory()
            else:
                default = None

            field_schema = {
                "type": field.type.__name__ if hasattr(field.type, '__name__') else str(field.type),
                "default": default,
                "description": f"{field.name} configuration parameter"
            }

            env_var = _get_env_var_for_field(field.name)
            if env_var:
                field_schema["env_var"] = env_var

            section_schema["fields"][field.name] = field_schema

        schema["sections"][section_name] = section_schema

    return schema


def _get_env_var_for_field(field: str) -> str:
    """Map configuration field to environment variable name."""
    env_mappings = {
        "products_text": EnvKeys.CATALOG,
        "rules_text": EnvKeys.DELIVERY_RULES,
        "enabled": EnvKeys.OFFERS_ENABLED,
        "half_price_codes": EnvKeys.HALF_PRICE_CODES,
    }

    return env_mappings.get(field, "")


def validate_config_completeness(config) -> List[str]:
    """
    Validate that all required configuration is present.

    Args:
        config: Configuration instance to validate

    Returns:
        List of validation warnings and errors
    """
    issues = []

    issues.extend(config.validate())

    if config.offers.enabled and not config.offers.half_price_codes:
        issues.append(
            f"{EnvKeys.OFFERS_ENABLED} is on but {EnvKeys.HALF_PRICE_CODES} lists no products"
        )

    if len(set(config.offers.half_price_codes)) != len(config.offers.half_price_codes):
        issues.append(f"{EnvKeys.HALF_PRICE_CODES} lists a product more than once")

    return issues


def generate_env_file_template(environment: str = "development") -> str:
    """
    Generate a .env file template for the specified environment.

    Args:
        environment: Target environment (development, production, testing)

    Returns:
        .env file content as string
    """
    log_levels = {
        "development": "DEBUG",
        "production": "INFO",
        "testing": "DEBUG",
    }
    if environment not in log_levels:
        environment = "development"

    return f'''# Acme Basket - {environment.title()} Environment

# Environment
{EnvKeys.ENVIRONMENT}={environment}

# Catalog (code:name:price, comma separated)
{EnvKeys.CATALOG}={CatalogConfig().products_text}

# Delivery tiers (threshold:charge, comma separated)
{EnvKeys.DELIVERY_RULES}={DeliveryConfig().rules_text}

# Offers
{EnvKeys.OFFERS_ENABLED}=true
{EnvKeys.HALF_PRICE_CODES}={",".join(OfferConfig().half_price_codes)}

# Logging
{EnvKeys.LOG_LEVEL}={log_levels[environment]}
'''
