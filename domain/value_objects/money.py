"""
Money helpers for a single decimal currency unit.

All monetary amounts are plain ``decimal.Decimal`` values kept exact through
subtotal, discount and delivery; only the final presentation step cuts them
to cents.
"""

from __future__ import annotations
from decimal import Decimal, ROUND_DOWN
from typing import Any, Iterable

from shared.constants import CENT, CURRENCY_SYMBOL, ZERO
from shared.validators import validate_decimal


def to_money(value: Any, field_name: str = "amount") -> Decimal:
    """Convert int/str/float/Decimal to an exact Decimal amount."""
    return validate_decimal(value, field_name)


def sum_money(amounts: Iterable[Decimal]) -> Decimal:
    """
    Sum monetary amounts exactly.

    Returns ``Decimal("0")`` for an empty iterable rather than the int ``0``
    that the builtin ``sum`` would give.
    """
    return sum(amounts, ZERO)


def truncate_to_cents(amount: Decimal) -> Decimal:
    """
    Cut an amount to two decimal places, toward zero.

    Never rounds up in magnitude: 12.897 -> 12.89 and -12.897 -> -12.89.
    """
    return to_money(amount).quantize(CENT, rounding=ROUND_DOWN)


def format_money(amount: Decimal, symbol: bool = True, exact: bool = False) -> str:
    """
    Format as "$54.37" (or "54.37" without the symbol).

    With ``exact`` sub-cent digits are kept ("$16.475") instead of being
    truncated, so intermediate amounts add up to the truncated total.
    """
    amount = to_money(amount)
    if exact and amount.as_tuple().exponent < -2:
        amount_str = f"{amount:f}"
    else:
        amount_str = f"{truncate_to_cents(amount):.2f}"
    if symbol:
        return f"{CURRENCY_SYMBOL}{amount_str}"
    return amount_str
