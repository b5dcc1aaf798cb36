#!/usr/bin/env python3
"""
Per-Diem Rate Resolution

Resolves a per-diem Kind for a Country and optional Destination into an
amount in minor currency units. Rates are plain data in a RateTable, so new
combinations are added by configuration (see RateTable.from_yaml) rather
than by code. A combination the table does not define is an error, never a
default.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from ..core.country import Country, Destination
from ..core.currency import parse_major_to_minor_units
from ..core.errors import InvalidKind, UnsupportedRateCombination

logger = logging.getLogger(__name__)

# Key used in nested rate mappings for "no destination"
DOMESTIC = "domestic"


class Kind(Enum):
    """Per-diem categories."""

    FULL_DAY = "fullday"
    BREAKFAST = "breakfast"
    ARRIVAL = "arrival"
    DEPARTURE = "departure"
    DAYTRIP = "daytrip"
    LUNCH = "lunch"
    DINNER = "dinner"

    @classmethod
    def parse(cls, token: str) -> "Kind":
        try:
            return cls(token.strip().lower())
        except ValueError as e:
            raise InvalidKind(f"Invalid per diem kind specification: '{token}'") from e

    @property
    def label(self) -> str:
        """Display label used in merchant descriptions."""
        return _KIND_LABELS[self]


_KIND_LABELS = {
    Kind.FULL_DAY: "Full Day",
    Kind.BREAKFAST: "Breakfast",
    Kind.ARRIVAL: "Arrival/Departure Day",
    Kind.DEPARTURE: "Arrival/Departure Day",
    Kind.DAYTRIP: "Daytrip",
    Kind.LUNCH: "Lunch",
    Kind.DINNER: "Dinner",
}


RateKey = tuple[Country, Destination | None, Kind]


@dataclass(frozen=True)
class RateTable:
    """
    Lookup of per-diem amounts in minor units of the country's currency.

    Keys are (country, destination or None for domestic, kind).
    """

    rates: Mapping[RateKey, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for key, amount in self.rates.items():
            if amount <= 0:
                raise ValueError(f"Rate for {_describe(key)} must be positive, got {amount}")

    def amount(self, kind: Kind, country: Country, destination: Destination | None = None) -> int:
        """
        Get the per-day amount in minor units.

        Raises:
            UnsupportedRateCombination: If no rate is defined for the combination
        """
        key = (country, destination, kind)
        try:
            return self.rates[key]
        except KeyError:
            raise UnsupportedRateCombination(f"No per diem rate defined for {_describe(key)}") from None

    def merged_with(self, other: "RateTable") -> "RateTable":
        """Return a table with other's rates added to (and overriding) ours."""
        return RateTable(rates={**self.rates, **other.rates})

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RateTable":
        """
        Build a table from the nested configuration form.

        Example:
            {"Germany": {"domestic": {"fullday": "24.00", "lunch": 960},
                         "Switzerland": {"fullday": "62.00"}}}

        Integer amounts are minor units, strings are decimal major amounts.
        """
        rates: dict[RateKey, int] = {}
        for country_name, destinations in _section(data, "rate table").items():
            country = Country.parse(country_name)
            for destination_name, kinds in _section(destinations, f"country '{country_name}'").items():
                destination = None if destination_name == DOMESTIC else Destination.parse(destination_name)
                where = f"destination '{destination_name}' of country '{country_name}'"
                for kind_name, amount in _section(kinds, where).items():
                    rates[(country, destination, Kind.parse(kind_name))] = parse_major_to_minor_units(amount)
        return cls(rates=rates)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RateTable":
        """Load a table in the nested configuration form from a YAML file."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Rate file {path} must contain a mapping of countries")
        table = cls.from_mapping(data)
        logger.info(f"Loaded {len(table.rates)} per diem rates from {path}")
        return table


def _section(value: Any, where: str) -> Mapping[str, Any]:
    """Check one level of the nested rate form: a mapping with string keys."""
    if not isinstance(value, Mapping):
        raise ValueError(f"Expected a mapping for {where}, got {type(value).__name__}: {value!r}")
    for key in value:
        if not isinstance(key, str):
            raise ValueError(f"Expected a name in {where}, got {type(key).__name__}: {key!r}")
    return value


def _describe(key: RateKey) -> str:
    country, destination, kind = key
    where = f"{country} to {destination}" if destination else f"{country} ({DOMESTIC})"
    return f"kind '{kind.value}' in {where}"


DEFAULT_RATES: dict[str, Any] = {
    "Germany": {
        DOMESTIC: {
            "fullday": 2400,
            "arrival": 1200,
            "departure": 1200,
            "daytrip": 1200,
            "breakfast": 480,
            "lunch": 960,
            "dinner": 960,
        },
        # No meal rates abroad
        "Switzerland": {
            "fullday": 6200,
            "arrival": 4100,
            "departure": 4100,
            "daytrip": 4100,
        },
    },
}

DEFAULT_RATE_TABLE = RateTable.from_mapping(DEFAULT_RATES)


def load_rate_table(rates_file: str | Path | None = None) -> RateTable:
    """Get the built-in table, with the rates from rates_file merged over it if given."""
    if rates_file is None:
        return DEFAULT_RATE_TABLE
    return DEFAULT_RATE_TABLE.merged_with(RateTable.from_yaml(rates_file))


def amount(
    kind: Kind,
    country: Country,
    destination: Destination | None = None,
    table: RateTable = DEFAULT_RATE_TABLE,
) -> int:
    """Resolve a per-diem amount in minor units; see RateTable.amount."""
    return table.amount(kind, country, destination)
