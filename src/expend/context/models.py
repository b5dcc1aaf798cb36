#!/usr/bin/env python3
"""
User and Invocation Context

A UserContext holds the long-lived settings of one named context file
(project, email, country, tags). A Context adds the per-invocation values
(reference week, destination, comment). Both are immutable.
"""

import copy
from dataclasses import dataclass, field
from typing import Any

from ..core.country import Country, Destination
from ..core.dates import FinancialDate

DEFAULT_TRAVEL_TAG_NAME = "Travel"
DEFAULT_PER_DIEMS_CATEGORY_NAME = "Per Diem"


@dataclass(frozen=True)
class Tag:
    """An Expensify tag and whether expenses carrying it are billable."""

    name: str
    billable: bool = True


@dataclass(frozen=True)
class Tags:
    travel: Tag = field(default_factory=lambda: Tag(name=DEFAULT_TRAVEL_TAG_NAME))


@dataclass(frozen=True)
class Category:
    name: str


@dataclass(frozen=True)
class Categories:
    per_diems: Category = field(default_factory=lambda: Category(name=DEFAULT_PER_DIEMS_CATEGORY_NAME))


@dataclass(frozen=True)
class UserContext:
    """Settings shared by every post made with one named context."""

    project: str
    email: str
    country: Country
    categories: Categories = field(default_factory=Categories)
    tags: Tags = field(default_factory=Tags)

    @property
    def travel_tag(self) -> str:
        """Composite Expensify tag "<project>:<travel tag name>"."""
        return f"{self.project}:{self.tags.travel.name}"

    def apply_to_payload(self, payload: Any) -> Any:
        """
        Stamp this context onto an arbitrary JSON payload.

        Overwrites an existing top-level "employeeEmail" with our email and the
        "tag" of every object in an existing "transactionList" with our
        project. Keys that are absent stay absent. The input is not modified.
        """
        patched = copy.deepcopy(payload)
        if not isinstance(patched, dict):
            return patched

        if "employeeEmail" in patched:
            patched["employeeEmail"] = self.email

        transactions = patched.get("transactionList")
        if isinstance(transactions, list):
            for item in transactions:
                if isinstance(item, dict) and "tag" in item:
                    item["tag"] = self.project

        return patched

    def to_dict(self) -> dict[str, Any]:
        return {
            "project": self.project,
            "email": self.email,
            "country": self.country.value,
            "categories": {"per_diems": {"name": self.categories.per_diems.name}},
            "tags": {"travel": {"name": self.tags.travel.name, "billable": self.tags.travel.billable}},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserContext":
        """
        Create a UserContext from its stored form.

        Country is required; categories and tags fall back to their defaults.

        Raises:
            KeyError: If project, email or country are missing
            InvalidCountry: If the country is unknown
        """
        categories = Categories()
        per_diems = data.get("categories", {}).get("per_diems")
        if per_diems is not None:
            categories = Categories(per_diems=Category(name=per_diems["name"]))

        tags = Tags()
        travel = data.get("tags", {}).get("travel")
        if travel is not None:
            tags = Tags(travel=Tag(name=travel["name"], billable=bool(travel.get("billable", True))))

        return cls(
            project=data["project"],
            email=data["email"],
            country=Country.parse(data["country"]),
            categories=categories,
            tags=tags,
        )


@dataclass(frozen=True)
class Context:
    """A UserContext plus the values supplied for a single invocation."""

    user: UserContext
    reference_date: FinancialDate | None = None
    destination: Destination | None = None
    comment: str | None = None

    def monday_of_reference_date(self) -> FinancialDate:
        """
        Get the Monday of the reference week (the current week if no reference date is set).

        Raises:
            DateArithmeticOverflow: If the Monday cannot be represented
        """
        reference = self.reference_date if self.reference_date is not None else FinancialDate.today()
        return reference.monday_of_week()
