"""
Custom exceptions and error handling utilities.

This module centralizes all custom exceptions used throughout the basket
pricing code and provides utilities for consistent error reporting.
"""

from typing import Dict, Any


# =================== BASE EXCEPTIONS ===================

class BasketError(Exception):
    """Base exception for all basket pricing errors."""

    def __init__(
        self,
        message: str,
        code: str = None,
        details: Dict[str, Any] = None,
        original_exception: Exception = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.replace("Error", "").lower()
        self.details = details or {}
        self.original_exception = original_exception

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for CLI/JSON output."""
        result = {
            "error": self.message,
            "code": self.code,
            "type": self.__class__.__name__
        }

        if self.details:
            result["details"] = self.details

        if self.original_exception:
            result["original_error"] = str(self.original_exception)

        return result


# =================== DATA AND VALIDATION EXCEPTIONS ===================

class DataValidationError(BasketError):
    """Raised when input data validation fails."""
    pass


class ProductNotFoundError(DataValidationError):
    """Raised when a product code is not present in the catalog."""

    def __init__(self, product_code: Any, details: Dict[str, Any] = None):
        super().__init__(
            message=f"Product not found: {product_code}",
            code="product_not_found",
            details={
                "product_code": product_code,
                **(details or {})
            }
        )
        self.product_code = product_code


class InvalidPriceError(DataValidationError):
    """Raised when a monetary amount cannot be used as a price or charge."""

    def __init__(
        self,
        field_name: str,
        value: Any,
        reason: str,
        original_exception: Exception = None
    ):
        super().__init__(
            message=f"Invalid {field_name}: {value!r} ({reason})",
            code="invalid_price",
            details={
                "field": field_name,
                "value": str(value),
                "reason": reason
            },
            original_exception=original_exception
        )
        self.field_name = field_name
        self.value = value


# =================== CONFIGURATION EXCEPTIONS ===================

class ConfigurationError(BasketError):
    """Raised when configuration is invalid."""
    pass


# =================== ERROR HANDLING UTILITIES ===================

def create_error_response(
    exception: Exception,
    include_details: bool = True
) -> Dict[str, Any]:
    """
    Create standardized error response from exception.

    Args:
        exception: Exception to convert
        include_details: Whether to include detailed error information

    Returns:
        Standardized error response dictionary
    """
    if isinstance(exception, BasketError):
        response = {
            "success": False,
            "error": exception.message,
            "code": exception.code
        }

        if include_details and exception.details:
            response["details"] = exception.details

        return response
    else:
        return {
            "success": False,
            "error": str(exception),
            "code": "unexpected_error"
        }


# =================== EXPORT ALL EXCEPTIONS ===================

__all__ = [
    # Base exceptions
    "BasketError",

    # Data validation exceptions
    "DataValidationError",
    "ProductNotFoundError",
    "InvalidPriceError",

    # Configuration exceptions
    "ConfigurationError",

    # Utility functions
    "create_error_response",
]
