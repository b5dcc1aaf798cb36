#!/usr/bin/env python3
"""
Currency Handling Utilities

All per-diem amounts are integers in minor currency units (cents). Only
formatting for display divides them, and it does so with integer arithmetic.

Currency Systems:
- Internal calculations and the Expensify payload use minor units: 100 = 1.00
- Display uses symbol-prefixed strings: "€24.00"
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


@dataclass(frozen=True)
class Currency:
    """A currency with its ISO code and display symbol."""

    code: str
    symbol: str

    def __str__(self) -> str:
        return self.code


EUR = Currency(code="EUR", symbol="€")


def minor_units_to_major_str(minor_units: int) -> str:
    """
    Convert minor units to a major-unit string using pure integer arithmetic.

    Args:
        minor_units: Amount in minor units

    Returns:
        Formatted string with two decimals

    Example:
        minor_units_to_major_str(2400) -> "24.00"
        minor_units_to_major_str(-960) -> "-9.60"
    """
    is_negative = minor_units < 0
    abs_units = abs(int(minor_units))

    major = abs_units // 100
    remainder = abs_units % 100

    if is_negative:
        return f"-{major}.{remainder:02d}"
    return f"{major}.{remainder:02d}"


def format_minor_units(minor_units: int, currency: Currency) -> str:
    """Format minor units as a symbol-prefixed string, e.g. "€24.00"."""
    return f"{currency.symbol}{minor_units_to_major_str(minor_units)}"


def parse_major_to_minor_units(amount: str | int) -> int:
    """
    Parse a major-unit amount to minor units.

    Integers are taken to be minor units already. Strings are decimal major
    amounts and may carry a currency symbol and thousands separators.

    Examples:
        parse_major_to_minor_units("24.00") -> 2400
        parse_major_to_minor_units("€9.60") -> 960
        parse_major_to_minor_units("1,200") -> 120000
        parse_major_to_minor_units(480) -> 480

    Raises:
        ValueError: If the string is not a decimal amount or has sub-cent precision
    """
    if isinstance(amount, bool):
        raise ValueError(f"Invalid amount: {amount!r}")
    if isinstance(amount, int):
        return amount

    clean = str(amount).replace(",", "").strip().lstrip("€$").strip()
    try:
        value = Decimal(clean) * 100
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: '{amount}'") from e

    if value != value.to_integral_value():
        raise ValueError(f"Amount '{amount}' has more than two decimal places")
    return int(value)
