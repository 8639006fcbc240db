from decimal import Decimal

import pytest

from domain.value_objects.money import format_money, sum_money, to_money, truncate_to_cents
from shared.exceptions import InvalidPriceError


@pytest.mark.parametrize("amount, expected", [
    ("12.897", "12.89"),
    ("54.375", "54.37"),
    ("98.275", "98.27"),
    ("12.899999", "12.89"),
    ("4.95", "4.95"),
    ("0", "0.00"),
    ("-12.897", "-12.89"),
    ("-0.001", "0.00"),
])
def test_truncate_to_cents(amount, expected):
    assert truncate_to_cents(Decimal(amount)) == Decimal(expected)


def test_sum_money_of_nothing_is_decimal_zero():
    result = sum_money([])

    assert result == Decimal("0")
    assert isinstance(result, Decimal)


def test_sum_money_is_exact():
    assert sum_money([Decimal("0.1")] * 3) == Decimal("0.3")


def test_to_money_avoids_float_artifacts():
    assert to_money(0.1) + to_money(0.2) == Decimal("0.3")


def test_to_money_rejects_garbage():
    with pytest.raises(InvalidPriceError):
        to_money("twelve")


@pytest.mark.parametrize("amount, symbol, expected", [
    (Decimal("54.375"), True, "$54.37"),
    (Decimal("4.95"), True, "$4.95"),
    (Decimal("0"), True, "$0.00"),
    (Decimal("60.85"), False, "60.85"),
])
def test_format_money(amount, symbol, expected):
    assert format_money(amount, symbol=symbol) == expected


@pytest.mark.parametrize("amount, expected", [
    (Decimal("16.475"), "$16.475"),
    (Decimal("65.90"), "$65.90"),
    (Decimal("0"), "$0.00"),
    (Decimal("2.95"), "$2.95"),
])
def test_format_money_exact_keeps_sub_cent_digits(amount, expected):
    assert format_money(amount, exact=True) == expected
