"""
Expend - Per-Diem Expense Filing for Expensify

Computes per-diem travel expense reports and posts them to the Expensify
Integration Server.

Key Features:
- Human-friendly day selections ("weekdays", "mon-wed", "tue,thu")
- Per-diem rates by kind, country and destination, as configuration data
- Integer minor-unit arithmetic for all amounts
- Named contexts for project, email and tag settings

Domain Packages:
- core: Errors, currency, money, dates, configuration
- perdiem: Weekday, time period parsing, rates, transaction expansion
- context: User contexts and their on-disk storage
- expensify: Payload models and the HTTP client
- cli: Command-line interface

Example Usage:
    from expend.perdiem import Kind, Mode, expand, parse_time_period
"""

__version__ = "0.1.0"

from .command import PayloadCommand, PerDiemCommand, build_payload, execute
from .context.models import Context, UserContext
from .core.config import Environment, get_config
from .core.errors import ExpendError
from .perdiem import Kind, Mode, Weekday, expand, parse_time_period

__all__ = [
    "Context",
    "Environment",
    "ExpendError",
    "Kind",
    "Mode",
    "PayloadCommand",
    "PerDiemCommand",
    "UserContext",
    "Weekday",
    "build_payload",
    "execute",
    "expand",
    "get_config",
    "parse_time_period",
]
