"""
Reusable validators and validation utilities.

This module provides the validation functions shared by the domain models,
configuration parsing and the CLI so product codes and monetary amounts are
normalized the same way everywhere.
"""

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, List

from shared.constants import ZERO
from shared.exceptions import DataValidationError, InvalidPriceError


# =================== PRODUCT CODE VALIDATION ===================

def normalize_product_code(code: Any) -> str:
    """
    Normalize a product code for lookup and comparison.

    Strings, enum members and any other object are stringified, trimmed and
    uppercased. ``None`` normalizes to the empty string, which never matches
    a catalog entry.

    Args:
        code: Raw product code

    Returns:
        Normalized product code (possibly empty)
    """
    if code is None:
        return ""

    if isinstance(code, Enum):
        code = code.value

    return str(code).strip().upper()


def validate_product_code(code: Any) -> str:
    """
    Validate and normalize a product code.

    Args:
        code: Product code to validate

    Returns:
        Normalized product code

    Raises:
        DataValidationError: If the code is empty after normalization
    """
    normalized = normalize_product_code(code)

    if not normalized:
        raise DataValidationError(
            "Product code cannot be None or empty",
            code="invalid_product_code",
            details={"product_code": code}
        )

    return normalized


def validate_product_codes(codes: Any) -> List[str]:
    """
    Normalize a list of product codes, preserving order and duplicates.

    Accepts a comma-separated string or an iterable of codes. Blank entries
    are skipped; unknown codes are left for the catalog to reject.
    """
    if not codes:
        return []

    if isinstance(codes, str):
        raw_codes = codes.split(",")
    else:
        raw_codes = list(codes)

    normalized = [normalize_product_code(c) for c in raw_codes]
    return [c for c in normalized if c]


# =================== MONETARY VALIDATION ===================

def validate_decimal(value: Any, field_name: str = "amount") -> Decimal:
    """
    Convert a numeric value to an exact Decimal.

    Floats go through ``str()`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion.

    Args:
        value: Int, float, str or Decimal
        field_name: Name of the field for error messages

    Returns:
        Exact Decimal value

    Raises:
        InvalidPriceError: If the value is missing, boolean, non-numeric or not finite
    """
    if value is None or isinstance(value, bool):
        raise InvalidPriceError(field_name, value, "must be a number")

    try:
        if isinstance(value, Decimal):
            amount = value
        elif isinstance(value, str):
            amount = Decimal(value.strip())
        else:
            amount = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as e:
        raise InvalidPriceError(field_name, value, "not a number", original_exception=e)

    if not amount.is_finite():
        raise InvalidPriceError(field_name, value, "cannot be infinite or NaN")

    return amount


def validate_price(value: Any, field_name: str = "price") -> Decimal:
    """
    Validate a non-negative monetary amount.

    Raises:
        InvalidPriceError: If the value is not a finite, non-negative number
    """
    amount = validate_decimal(value, field_name)

    if amount < ZERO:
        raise InvalidPriceError(field_name, value, "cannot be negative")

    return amount
