#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer minor units internally.
Prevents floating-point errors and keeps the currency next to the amount.
"""

from dataclasses import dataclass

from .currency import Currency, format_minor_units


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in minor units of a given currency.

    Examples:
        >>> rate = Money(minor_units=2400, currency=EUR)
        >>> str(rate)
        '€24.00'
        >>> str(rate * 5)
        '€120.00'
        >>> (-rate).minor_units
        -2400
    """

    minor_units: int
    currency: Currency

    def to_minor_units(self) -> int:
        """Get value in minor units."""
        return self.minor_units

    def _check_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise ValueError(f"Cannot combine {self.currency} with {other.currency}")

    def __add__(self, other: "Money") -> "Money":
        self._check_currency(other)
        return Money(minor_units=self.minor_units + other.minor_units, currency=self.currency)

    def __sub__(self, other: "Money") -> "Money":
        self._check_currency(other)
        return Money(minor_units=self.minor_units - other.minor_units, currency=self.currency)

    def __mul__(self, scalar: int) -> "Money":
        """Multiply Money by integer scalar."""
        return Money(minor_units=self.minor_units * scalar, currency=self.currency)

    def __neg__(self) -> "Money":
        return Money(minor_units=-self.minor_units, currency=self.currency)

    def __str__(self) -> str:
        return format_minor_units(self.minor_units, self.currency)
