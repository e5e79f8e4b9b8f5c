"""Amount conversion utilities.

Budget amounts are integer milliunits: 1000 milliunits make one currency
unit. Settlement amounts can carry half a milliunit, so they arrive here as
Decimal.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

MILLIUNITS_PER_UNIT = Decimal(1000)

Milliunits = Union[int, Decimal]


def milliunits_to_decimal(milliunits: Milliunits) -> Decimal:
    """Convert milliunits to currency units without rounding."""
    return Decimal(milliunits) / MILLIUNITS_PER_UNIT


def format_milliunits(milliunits: Milliunits, currency: str = "") -> str:
    """Format milliunits as a currency string with two decimals.

    Examples:
        format_milliunits(-12340) -> "-12.34"
        format_milliunits(25000, "£") -> "£25.00"
        format_milliunits(-5, "£") -> "-£0.01"
    """
    units = milliunits_to_decimal(milliunits).quantize(
        Decimal("0.01"), rounding=ROUND_HALF_UP
    )
    sign = "-" if units < 0 else ""
    return f"{sign}{currency}{abs(units):,.2f}"
