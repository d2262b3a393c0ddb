# tests/test_pricing.py
"""
Price labels: two decimals, French separators, trailing euro sign,
whatever the display language.
"""
import math

import pytest

from menupub.services.menu import format_price

NNBSP = "\u202f"


@pytest.mark.parametrize("price,expected", [
    (12.5, "12,50 €"),
    (0, "0,00 €"),
    (9, "9,00 €"),
    (3.999, "4,00 €"),
    (2.005, "2,01 €"),
    ("7.2", "7,20 €"),
    (1234.5, f"1{NNBSP}234,50 €"),
    (1234567, f"1{NNBSP}234{NNBSP}567,00 €"),
])
def test_format_price(price, expected):
    assert format_price(price) == expected


@pytest.mark.parametrize("price", [None, "", "abc", float("nan"), math.inf, -math.inf, True, [], {}])
def test_invalid_prices_render_as_zero(price):
    assert format_price(price) == "0,00 €"


def test_negative_prices_keep_sign():
    assert format_price(-4.5) == "-4,50 €"


@pytest.mark.parametrize("price,expected", [
    (1e26, "100" + f"{NNBSP}000" * 8 + ",00 €"),
    ("123456789012345678901234567890.125", "123" + "".join(f"{NNBSP}{g}" for g in ["456", "789", "012", "345", "678", "901", "234", "567", "890"]) + ",13 €"),
])
def test_huge_prices_keep_every_digit(price, expected):
    assert format_price(price) == expected


def test_huge_float_does_not_raise():
    assert format_price(1e30).endswith(",00 €")
