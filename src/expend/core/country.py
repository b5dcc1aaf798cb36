#!/usr/bin/env python3
"""
Countries and Destinations

Country decides the currency of every amount; Destination optionally selects
a different rate class for travel abroad. Neither has a default: both are
threaded explicitly through the invocation context.
"""

from enum import Enum

from .currency import EUR, Currency
from .errors import InvalidCountry, InvalidDestination


class Country(Enum):
    """Countries with a known currency and rate table."""

    GERMANY = "Germany"

    @classmethod
    def parse(cls, name: str) -> "Country":
        for country in cls:
            if country.value.lower() == name.strip().lower():
                return country
        raise InvalidCountry(f"Invalid country identifier: '{name}'. Country is not implemented.")

    @property
    def currency(self) -> Currency:
        return _COUNTRY_CURRENCIES[self]

    def __str__(self) -> str:
        return self.value


_COUNTRY_CURRENCIES = {
    Country.GERMANY: EUR,
}


class Destination(Enum):
    """Travel destinations whose rates differ from domestic travel."""

    SWITZERLAND = "Switzerland"

    @classmethod
    def parse(cls, name: str) -> "Destination":
        for destination in cls:
            if destination.value.lower() == name.strip().lower():
                return destination
        raise InvalidDestination(f"Invalid destination identifier: '{name}'")

    def __str__(self) -> str:
        return self.value
