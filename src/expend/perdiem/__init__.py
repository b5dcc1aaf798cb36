"""
Per-Diem Engine

Parses day selections, resolves rates and expands claims into Expensify
transaction lines.
"""

from .weekday import Weekday
from .timeperiod import AllWeekdays, ArbitrarySet, ContiguousRange, SingleDay, TimePeriod, from_days, parse_time_period
from ..core.country import Country, Destination
from .rates import DEFAULT_RATE_TABLE, Kind, RateTable, amount, load_rate_table
from .expander import Mode, expand, transaction_list_from_per_diem

__all__ = [
    "DEFAULT_RATE_TABLE",
    "AllWeekdays",
    "ArbitrarySet",
    "ContiguousRange",
    "Country",
    "Destination",
    "Kind",
    "Mode",
    "RateTable",
    "SingleDay",
    "TimePeriod",
    "Weekday",
    "amount",
    "expand",
    "from_days",
    "load_rate_table",
    "parse_time_period",
    "transaction_list_from_per_diem",
]
