#!/usr/bin/env python3
"""Tests for time period parsing and normalization."""

import pytest

from expend.core.errors import InvalidDayOrder, InvalidTimePeriodSyntax, InvalidWeekday
from expend.perdiem.timeperiod import (
    AllWeekdays,
    ArbitrarySet,
    ContiguousRange,
    SingleDay,
    from_days,
    parse_time_period,
)
from expend.perdiem.weekday import Weekday

MON, TUE, WED, THU, FRI, SAT, SUN = Weekday


@pytest.mark.perdiem
class TestWeekdays:
    def test_weekdays(self):
        assert parse_time_period("weekdays") == AllWeekdays()

    def test_weekdays_with_whitespace(self):
        assert parse_time_period("  weekdays ") == AllWeekdays()

    def test_weekdays_is_case_sensitive(self):
        with pytest.raises(InvalidWeekday):
            parse_time_period("Weekdays")

    def test_days(self):
        assert AllWeekdays().days == (MON, TUE, WED, THU, FRI)


@pytest.mark.perdiem
class TestSingleDay:
    @pytest.mark.parametrize("text", ["mon", "Monday", "  Mon ", "Monday  ", "MON"])
    def test_single_day(self, text):
        assert parse_time_period(text) == SingleDay(MON)

    def test_range_missing_end(self):
        assert parse_time_period("mon- ") == SingleDay(MON)

    def test_range_same_day(self):
        assert parse_time_period("thu-thursday") == SingleDay(THU)

    def test_skips_empty_segments(self):
        assert parse_time_period("thu- - - Thursday") == SingleDay(THU)

    def test_duplicates_collapse(self):
        assert parse_time_period("Sunday, sun") == SingleDay(SUN)


@pytest.mark.perdiem
class TestContiguousRange:
    def test_dash_range(self):
        assert parse_time_period("mon-saturday") == ContiguousRange(MON, SAT)

    def test_dash_range_neighbours(self):
        assert parse_time_period("tuesday-wednesday") == ContiguousRange(TUE, WED)

    def test_dash_range_whitespace(self):
        assert parse_time_period("  mon  -  saturday  ") == ContiguousRange(MON, SAT)

    def test_two_consecutive_days(self):
        assert parse_time_period("mon,tue") == ContiguousRange(MON, TUE)

    def test_gap_free_set_collapses(self):
        assert parse_time_period("wed, tue, thu, tue") == ContiguousRange(TUE, THU)

    def test_days(self):
        assert ContiguousRange(WED, SAT).days == (WED, THU, FRI, SAT)

    def test_reversed_order_is_an_error(self):
        with pytest.raises(InvalidDayOrder) as exc_info:
            parse_time_period("wednesday-tue")
        message = str(exc_info.value)
        assert "'Wednesday'" in message
        assert "'Tuesday'" in message
        assert "Tuesday-Wednesday" in message

    def test_direct_construction_checks_order(self):
        with pytest.raises(InvalidDayOrder):
            ContiguousRange(FRI, MON)
        with pytest.raises(InvalidDayOrder):
            ContiguousRange(FRI, FRI)


@pytest.mark.perdiem
class TestArbitrarySet:
    def test_sorted(self):
        assert parse_time_period("mon,tuesday,sun") == ArbitrarySet((MON, TUE, SUN))

    def test_whitespace(self):
        assert parse_time_period(" tuesday, Saturday ") == ArbitrarySet((TUE, SAT))

    def test_reorder(self):
        assert parse_time_period(" Saturday, Monday, Wednesday, Sunday ") == ArbitrarySet((MON, WED, SAT, SUN))

    def test_skip_empty(self):
        assert parse_time_period("mon, , ,sun") == ArbitrarySet((MON, SUN))

    def test_deduplicates(self):
        assert parse_time_period("sat,mon,Saturday,wed,mon") == ArbitrarySet((MON, WED, SAT))

    def test_accepts_list(self):
        assert ArbitrarySet([MON, WED, SAT]).days == (MON, WED, SAT)

    def test_rejects_unsorted(self):
        with pytest.raises(InvalidTimePeriodSyntax):
            ArbitrarySet((WED, MON))

    @pytest.mark.parametrize("days", [(MON,), (MON, TUE), (TUE, WED, THU)])
    def test_rejects_collapsible(self, days):
        with pytest.raises(InvalidTimePeriodSyntax):
            ArbitrarySet(days)


@pytest.mark.perdiem
class TestSyntaxErrors:
    def test_only_commas(self):
        with pytest.raises(InvalidTimePeriodSyntax, match="Didn't see a single weekday"):
            parse_time_period(", , ,")

    @pytest.mark.parametrize("text", ["", "   ", " - "])
    def test_empty(self, text):
        with pytest.raises(InvalidTimePeriodSyntax, match="Didn't see a single weekday"):
            parse_time_period(text)

    def test_too_many_days(self):
        with pytest.raises(InvalidTimePeriodSyntax, match="More than two days") as exc_info:
            parse_time_period("mon-saturday-tue")
        assert "'mon-saturday-tue'" in str(exc_info.value)

    def test_list_as_range_end(self):
        with pytest.raises(InvalidTimePeriodSyntax):
            parse_time_period("mon,tue-fri")

    def test_invalid_day_in_list(self):
        with pytest.raises(InvalidWeekday, match="'someday'"):
            parse_time_period("mon, someday")


@pytest.mark.perdiem
class TestFromDays:
    def test_empty(self):
        with pytest.raises(InvalidTimePeriodSyntax):
            from_days([])

    def test_collapses(self):
        assert from_days([FRI]) == SingleDay(FRI)
        assert from_days([FRI, THU]) == ContiguousRange(THU, FRI)
        assert from_days([FRI, MON]) == ArbitrarySet((MON, FRI))


@pytest.mark.perdiem
class TestDisplay:
    @pytest.mark.parametrize(
        "period,text",
        [
            (AllWeekdays(), "weekdays"),
            (SingleDay(TUE), "Tuesday"),
            (ContiguousRange(MON, SAT), "Monday-Saturday"),
            (ArbitrarySet((MON, WED, SAT)), "Monday,Wednesday,Saturday"),
        ],
    )
    def test_display_parses_back(self, period, text):
        assert str(period) == text
        assert parse_time_period(text) == period

    @pytest.mark.parametrize("text", ["mon,tuesday,sun", "thu", "fri-sun", "weekdays"])
    def test_constituent_days_reparse(self, text):
        period = parse_time_period(text)
        assert tuple(Weekday.parse(str(d)) for d in period.days) == period.days
