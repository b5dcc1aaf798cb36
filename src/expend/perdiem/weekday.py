#!/usr/bin/env python3
"""
Weekday Model

Ordered Monday-to-Sunday enumeration with tolerant parsing and date offset
arithmetic relative to the Monday of a reference week.
"""

from enum import Enum

from ..core.dates import FinancialDate
from ..core.errors import InvalidWeekday


class Weekday(Enum):
    """A day of the week, ordered Monday (0) through Sunday (6)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, token: str) -> "Weekday":
        """
        Parse a full weekday name or its 3-letter abbreviation.

        Matching is case-insensitive and ignores surrounding whitespace.

        Raises:
            InvalidWeekday: If the token names no weekday
        """
        day = _TOKENS.get(token.strip().lower())
        if day is None:
            raise InvalidWeekday(f"Invalid weekday specification: '{token}'")
        return day

    @property
    def ordinal(self) -> int:
        """Monday-based offset, 0..6."""
        return self.value

    def is_after(self, other: "Weekday") -> bool:
        return self.ordinal > other.ordinal

    def date_from(self, reference_monday: FinancialDate) -> FinancialDate:
        """
        Get the concrete date of this weekday in the week starting at reference_monday.

        Raises:
            DateArithmeticOverflow: If the date cannot be represented
        """
        return reference_monday.plus_days(self.ordinal)

    def __lt__(self, other: "Weekday") -> bool:
        if not isinstance(other, Weekday):
            return NotImplemented
        return self.ordinal < other.ordinal

    def __str__(self) -> str:
        return self.name.capitalize()


_TOKENS: dict[str, Weekday] = {}
for _day in Weekday:
    _TOKENS[_day.name.lower()] = _day
    _TOKENS[_day.name.lower()[:3]] = _day
