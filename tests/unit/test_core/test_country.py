#!/usr/bin/env python3
"""Tests for countries and destinations."""

import pytest

from expend.core.country import Country, Destination
from expend.core.currency import EUR
from expend.core.errors import ExpendError, InvalidCountry, InvalidDestination


class TestCountry:
    @pytest.mark.parametrize("name", ["Germany", "germany", " GERMANY "])
    def test_parse(self, name):
        assert Country.parse(name) == Country.GERMANY

    def test_parse_unknown(self):
        with pytest.raises(InvalidCountry, match="'Atlantis'"):
            Country.parse("Atlantis")

    def test_currency(self):
        assert Country.GERMANY.currency == EUR
        assert Country.GERMANY.currency.symbol == "€"

    def test_display(self):
        assert str(Country.GERMANY) == "Germany"


class TestDestination:
    def test_parse(self):
        assert Destination.parse("switzerland") == Destination.SWITZERLAND

    def test_parse_unknown_is_value_error(self):
        with pytest.raises(InvalidDestination) as exc_info:
            Destination.parse("Moon")
        assert isinstance(exc_info.value, ValueError)
        assert isinstance(exc_info.value, ExpendError)
