"""
Value helpers for domain models.

Monetary amounts are exact ``Decimal`` values; these helpers convert, sum,
truncate and format them consistently.
"""

from domain.value_objects.money import format_money, sum_money, to_money, truncate_to_cents

__all__ = [
    "format_money",
    "sum_money",
    "to_money",
    "truncate_to_cents",
]
