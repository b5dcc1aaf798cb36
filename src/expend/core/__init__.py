"""
Core Utilities Package

Shared primitives used across expend:
- Error taxonomy
- Currency values and minor-unit formatting
- Immutable Money and FinancialDate types
- Configuration management
"""

from .config import Config, Environment, get_config, reload_config
from .country import Country, Destination
from .currency import EUR, Currency, format_minor_units, minor_units_to_major_str, parse_major_to_minor_units
from .dates import EXPENSIFY_DATE_FORMAT, FinancialDate
from .errors import (
    ContextNotFound,
    DateArithmeticOverflow,
    ExpendError,
    ExpensifyRequestError,
    InvalidContextFile,
    InvalidCountry,
    InvalidDayOrder,
    InvalidDestination,
    InvalidKind,
    InvalidTimePeriodSyntax,
    InvalidWeekday,
    PostAborted,
    UnsupportedRateCombination,
)
from .money import Money

__all__ = [
    "EUR",
    "EXPENSIFY_DATE_FORMAT",
    "Config",
    "ContextNotFound",
    "Country",
    "Currency",
    "DateArithmeticOverflow",
    "Destination",
    "Environment",
    "ExpendError",
    "ExpensifyRequestError",
    "FinancialDate",
    "InvalidContextFile",
    "InvalidCountry",
    "InvalidDayOrder",
    "InvalidDestination",
    "InvalidKind",
    "InvalidTimePeriodSyntax",
    "InvalidWeekday",
    "Money",
    "PostAborted",
    "UnsupportedRateCombination",
    "format_minor_units",
    "get_config",
    "minor_units_to_major_str",
    "parse_major_to_minor_units",
    "reload_config",
]
