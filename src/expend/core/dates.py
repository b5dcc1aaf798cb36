#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Immutable date wrapper with consistent formatting for expense submission.
All date arithmetic in expend goes through this type so that overflow is
reported as a DateArithmeticOverflow instead of leaking OverflowError.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .errors import DateArithmeticOverflow

# Expensify expects strictly YYYY-MM-DD
EXPENSIFY_DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class FinancialDate:
    """Immutable date wrapper with consistent formatting."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, date_format: str = EXPENSIFY_DATE_FORMAT) -> "FinancialDate":
        """
        Parse from string in specified format.

        Args:
            date_str: Date string to parse
            date_format: Date format (default: ISO format "%Y-%m-%d")

        Returns:
            FinancialDate object

        Raises:
            ValueError: If the string does not match the format
        """
        return cls(date=datetime.strptime(date_str.strip(), date_format).date())

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    def plus_days(self, days: int) -> "FinancialDate":
        """
        Return the date that lies the given number of days later (or earlier if negative).

        Raises:
            DateArithmeticOverflow: If the result is outside the supported date range
        """
        try:
            return FinancialDate(date=self.date + timedelta(days=days))
        except OverflowError as e:
            raise DateArithmeticOverflow(f"Failed to compute {days:+d} days from reference date {self}") from e

    def monday_of_week(self) -> "FinancialDate":
        """Get the Monday of the week this date falls in."""
        return self.plus_days(-self.date.weekday())

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def __str__(self) -> str:
        return self.to_iso_string()

    def __lt__(self, other: "FinancialDate") -> bool:
        return self.date < other.date

    def __le__(self, other: "FinancialDate") -> bool:
        return self.date <= other.date

    def __gt__(self, other: "FinancialDate") -> bool:
        return self.date > other.date

    def __ge__(self, other: "FinancialDate") -> bool:
        return self.date >= other.date

    def __repr__(self) -> str:
        return f"FinancialDate(date={self.date!r})"
