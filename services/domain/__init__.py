"""
Domain Services - Pure business logic layer.

This module contains services that implement pricing rules independent of
the CLI or configuration sources.
"""

from services.domain.delivery_charge_calculator import DeliveryChargeCalculator

__all__ = [
    "DeliveryChargeCalculator",
]
