#!/usr/bin/env python3
"""Tests for FinancialDate primitive type."""

from datetime import date

import pytest

from expend.core.dates import FinancialDate
from expend.core.errors import DateArithmeticOverflow


class TestFinancialDateConstruction:
    """Test FinancialDate construction."""

    def test_from_string(self):
        assert FinancialDate.from_string("2018-09-25").date == date(2018, 9, 25)

    def test_from_string_custom_format(self):
        assert FinancialDate.from_string("25.09.2018", date_format="%d.%m.%Y").date == date(2018, 9, 25)

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            FinancialDate.from_string("2018-13-01")

    def test_today(self):
        assert FinancialDate.today().date == date.today()


class TestFinancialDateArithmetic:
    """Test day offsets and week anchoring."""

    def test_plus_days(self):
        assert FinancialDate(date(2018, 9, 24)).plus_days(4) == FinancialDate(date(2018, 9, 28))

    def test_plus_days_across_month(self):
        assert FinancialDate(date(2018, 9, 30)).plus_days(1) == FinancialDate(date(2018, 10, 1))

    @pytest.mark.parametrize(
        "day,expected_monday",
        [
            (date(2018, 9, 24), date(2018, 9, 24)),
            (date(2018, 9, 25), date(2018, 9, 24)),
            (date(2018, 9, 30), date(2018, 9, 24)),
            (date(2018, 10, 1), date(2018, 10, 1)),
        ],
        ids=["monday", "tuesday", "sunday", "next_monday"],
    )
    def test_monday_of_week(self, day, expected_monday):
        assert FinancialDate(day).monday_of_week().date == expected_monday

    def test_overflow_is_a_distinct_error(self):
        with pytest.raises(DateArithmeticOverflow, match="9999-12-31"):
            FinancialDate(date.max).plus_days(1)

    def test_overflow_before_first_monday(self):
        # 0001-01-01 is a Monday, so the week of 0001-01-03 is still representable
        assert FinancialDate(date(1, 1, 3)).monday_of_week().date == date.min
        with pytest.raises(DateArithmeticOverflow):
            FinancialDate(date.min).plus_days(-1)


class TestFinancialDateFormatting:
    """Test FinancialDate formatting and ordering."""

    def test_to_iso_string(self):
        assert FinancialDate(date(2018, 9, 5)).to_iso_string() == "2018-09-05"

    def test_str(self):
        assert str(FinancialDate(date(2018, 9, 5))) == "2018-09-05"

    def test_ordering(self):
        earlier = FinancialDate(date(2018, 9, 24))
        later = FinancialDate(date(2018, 9, 25))
        assert earlier < later
        assert later > earlier
        assert earlier <= earlier
        assert sorted([later, earlier]) == [earlier, later]
