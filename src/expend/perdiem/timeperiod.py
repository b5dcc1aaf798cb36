#!/usr/bin/env python3
"""
Time Period Parsing

Turns a human-friendly day selection such as "weekdays", "mon-fri",
"tue" or "mon, wed, sat" into one canonical TimePeriod value.

Grammar:
- "weekdays" (case-sensitive): Monday through Friday
- "<day>-<day>": an inclusive range; equal ends collapse to a single day
- "<day>[,<day>...]": any set of days; duplicates are dropped and days are
  sorted, a single day or a gap-free run collapses to the narrower variant

Empty pieces between separators are skipped, so "mon- " is just "mon".
"""

from dataclasses import dataclass
from typing import Union

from ..core.errors import InvalidDayOrder, InvalidTimePeriodSyntax
from .weekday import Weekday

WEEKDAYS_LITERAL = "weekdays"


@dataclass(frozen=True)
class AllWeekdays:
    """Monday through Friday of the reference week."""

    @property
    def days(self) -> tuple[Weekday, ...]:
        return (Weekday.MONDAY, Weekday.TUESDAY, Weekday.WEDNESDAY, Weekday.THURSDAY, Weekday.FRIDAY)

    def __str__(self) -> str:
        return WEEKDAYS_LITERAL


@dataclass(frozen=True)
class SingleDay:
    """Exactly one weekday."""

    day: Weekday

    @property
    def days(self) -> tuple[Weekday, ...]:
        return (self.day,)

    def __str__(self) -> str:
        return str(self.day)


@dataclass(frozen=True)
class ContiguousRange:
    """An inclusive run of days; start is strictly before end."""

    start: Weekday
    end: Weekday

    def __post_init__(self) -> None:
        if not self.end.is_after(self.start):
            raise InvalidDayOrder(
                f"Day '{self.start}' must be temporally before '{self.end}', but came after. "
                f"Write '{self.end}-{self.start}' instead."
            )

    @property
    def days(self) -> tuple[Weekday, ...]:
        return tuple(Weekday(i) for i in range(self.start.ordinal, self.end.ordinal + 1))

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class ArbitrarySet:
    """Unique, ascending days that are neither a single day nor a contiguous run."""

    days: tuple[Weekday, ...]

    def __post_init__(self) -> None:
        days = tuple(self.days)
        object.__setattr__(self, "days", days)
        if list(days) != sorted(set(days)):
            raise InvalidTimePeriodSyntax(f"Days must be unique and in ascending order, got {self}")
        if len(days) < 2 or days[-1].ordinal - days[0].ordinal == len(days) - 1:
            raise InvalidTimePeriodSyntax(f"Days '{self}' are a single day or a contiguous range")

    def __str__(self) -> str:
        return ",".join(str(d) for d in self.days)


TimePeriod = Union[AllWeekdays, SingleDay, ContiguousRange, ArbitrarySet]


def _non_empty(pieces: list[str]) -> list[str]:
    return [p.strip() for p in pieces if p.strip()]


def from_days(days: list[Weekday]) -> TimePeriod:
    """
    Collapse a list of weekdays into the narrowest TimePeriod.

    Duplicates are dropped and the days are sorted first.

    Raises:
        InvalidTimePeriodSyntax: If days is empty
    """
    unique = sorted(set(days))
    if not unique:
        raise InvalidTimePeriodSyntax("Didn't see a single weekday")
    if len(unique) == 1:
        return SingleDay(unique[0])
    if unique[-1].ordinal - unique[0].ordinal == len(unique) - 1:
        return ContiguousRange(start=unique[0], end=unique[-1])
    return ArbitrarySet(days=tuple(unique))


def _parse_range_end(token: str, text: str) -> Weekday:
    if "," in token:
        raise InvalidTimePeriodSyntax(f"A day range must have a single day on each side of '-' in '{text}'")
    return Weekday.parse(token)


def parse_time_period(text: str) -> TimePeriod:
    """
    Parse a textual day selection.

    Raises:
        InvalidWeekday: If a token names no weekday
        InvalidTimePeriodSyntax: On more than two '-' separated parts or no days at all
        InvalidDayOrder: If an explicit range starts after it ends
    """
    segments = _non_empty(text.split("-"))

    if len(segments) > 2:
        raise InvalidTimePeriodSyntax(f"More than two days separated by '-' are not allowed in '{text}'")

    if len(segments) == 2:
        start = _parse_range_end(segments[0], text)
        end = _parse_range_end(segments[1], text)
        if start == end:
            return SingleDay(start)
        if start.is_after(end):
            raise InvalidDayOrder(
                f"Day '{start}' must be temporally before '{end}', but came after. Write '{end}-{start}' instead."
            )
        return ContiguousRange(start=start, end=end)

    if segments == [WEEKDAYS_LITERAL]:
        return AllWeekdays()

    tokens = _non_empty(segments[0].split(",")) if segments else []
    if not tokens:
        raise InvalidTimePeriodSyntax(f"Didn't see a single weekday in '{text}'")
    return from_days([Weekday.parse(t) for t in tokens])
