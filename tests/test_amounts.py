"""Tests for milliunit amount helpers."""

from decimal import Decimal

import pytest

from reimburse.utils.amounts import format_milliunits, milliunits_to_decimal


def test_milliunits_to_decimal():
    assert milliunits_to_decimal(-12340) == Decimal("-12.34")
    assert milliunits_to_decimal(Decimal("83.5")) == Decimal("0.0835")


@pytest.mark.parametrize(
    "milliunits,currency,expected",
    [
        (-12340, "", "-12.34"),
        (25000, "£", "£25.00"),
        (0, "£", "£0.00"),
        (-5, "£", "-£0.01"),
        (1234567890, "$", "$1,234,567.89"),
        (Decimal("83.5"), "£", "£0.08"),
        (Decimal("390000"), "£", "£390.00"),
    ],
)
def test_format_milliunits(milliunits, currency, expected):
    assert format_milliunits(milliunits, currency) == expected
