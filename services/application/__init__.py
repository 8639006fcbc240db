"""
Application Services - Orchestration and cross-cutting concerns.

This module contains services that assemble domain objects from
configuration and drive them on behalf of the command line.
"""

from services.application.checkout_service import CheckoutService

__all__ = [
    "CheckoutService",
]
