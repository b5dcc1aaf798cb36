#!/usr/bin/env python3
"""
Expensify Payload Models

Serializable records for the "expenses" payload accepted by the Expensify
Integration Server. Field names in to_dict() follow the API's camelCase.
"""

from dataclasses import dataclass, field
from typing import Any

EXPENSES_TYPE = "expenses"


@dataclass(frozen=True)
class TransactionListElement:
    """One expense line: a dated, tagged, signed amount in minor units."""

    created: str  # YYYY-MM-DD
    currency: str
    merchant: str
    amount: int
    category: str
    tag: str
    billable: bool
    reimbursable: bool
    comment: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "created": self.created,
            "currency": self.currency,
            "merchant": self.merchant,
            "amount": self.amount,
            "category": self.category,
            "tag": self.tag,
            "billable": self.billable,
            "reimbursable": self.reimbursable,
            "comment": self.comment,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TransactionListElement":
        return cls(
            created=data["created"],
            currency=data["currency"],
            merchant=data["merchant"],
            amount=int(data["amount"]),
            category=data.get("category", ""),
            tag=data.get("tag", ""),
            billable=bool(data.get("billable", False)),
            reimbursable=bool(data.get("reimbursable", True)),
            comment=data.get("comment", ""),
        )


@dataclass(frozen=True)
class TransactionList:
    """The "expenses" payload: an employee and their ordered expense lines."""

    employee_email: str
    transaction_list: tuple[TransactionListElement, ...] = field(default_factory=tuple)
    transaction_list_type: str = EXPENSES_TYPE

    def __post_init__(self) -> None:
        object.__setattr__(self, "transaction_list", tuple(self.transaction_list))

    @property
    def total_amount(self) -> int:
        """Sum of all line amounts in minor units."""
        return sum(t.amount for t in self.transaction_list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.transaction_list_type,
            "employeeEmail": self.employee_email,
            "transactionList": [t.to_dict() for t in self.transaction_list],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TransactionList":
        return cls(
            employee_email=data["employeeEmail"],
            transaction_list=tuple(TransactionListElement.from_dict(t) for t in data.get("transactionList", [])),
            transaction_list_type=data.get("type", EXPENSES_TYPE),
        )
