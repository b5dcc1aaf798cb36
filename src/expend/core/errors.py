#!/usr/bin/env python3
"""
Error Taxonomy for Expend

Every failure the per-diem engine can surface has its own type. Each one also
derives from the closest builtin so callers can catch either the specific
error or the generic family.
"""

from typing import Any


class ExpendError(Exception):
    """Base class for all errors raised by expend."""

    pass


class InvalidWeekday(ExpendError, ValueError):
    """Raised when a token does not name a weekday."""

    pass


class InvalidTimePeriodSyntax(ExpendError, ValueError):
    """Raised when a time period has a malformed dash/comma structure."""

    pass


class InvalidDayOrder(ExpendError, ValueError):
    """Raised when an explicit day range starts after it ends."""

    pass


class UnsupportedRateCombination(ExpendError, LookupError):
    """Raised when the rate table defines no amount for a kind/country/destination."""

    pass


class DateArithmeticOverflow(ExpendError, OverflowError):
    """Raised when a date computation leaves the representable range."""

    pass


class InvalidKind(ExpendError, ValueError):
    """Raised when a per-diem kind token is unknown."""

    pass


class InvalidCountry(ExpendError, ValueError):
    """Raised when a country identifier is unknown."""

    pass


class InvalidDestination(ExpendError, ValueError):
    """Raised when a destination identifier is unknown."""

    pass


class ContextNotFound(ExpendError):
    """Raised when a named context file does not exist."""

    pass


class InvalidContextFile(ExpendError):
    """Raised when a context file cannot be deserialized."""

    pass


class PostAborted(ExpendError):
    """Raised by a confirmation hook to stop a payload from being posted."""

    pass


class ExpensifyRequestError(ExpendError):
    """
    Raised when the Expensify API call fails.

    Attributes:
        status_code: HTTP status or Expensify responseCode, if one was seen
        response: Parsed response body, if the body was valid JSON
    """

    def __init__(self, message: str, status_code: int | None = None, response: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
