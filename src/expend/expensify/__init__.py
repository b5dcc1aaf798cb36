"""Expensify payload models and HTTP client."""

from .client import ENDPOINT, ExpensifyClient
from .models import EXPENSES_TYPE, TransactionList, TransactionListElement

__all__ = [
    "ENDPOINT",
    "EXPENSES_TYPE",
    "ExpensifyClient",
    "TransactionList",
    "TransactionListElement",
]
