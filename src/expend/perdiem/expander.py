#!/usr/bin/env python3
"""
Per-Diem Transaction Expander

Expands a (Context, TimePeriod, Kind, Mode) tuple into dated Expensify
transaction lines. Contiguous selections become one line spanning all their
days, arbitrary sets become one line per day. Amounts are integer minor
units throughout; only the merchant text shows a formatted rate.
"""

import logging
from enum import Enum

from ..context.models import Context
from ..core.dates import FinancialDate
from ..core.money import Money
from ..expensify.models import TransactionList, TransactionListElement
from .rates import DEFAULT_RATE_TABLE, Kind, RateTable
from .timeperiod import AllWeekdays, ArbitrarySet, ContiguousRange, SingleDay, TimePeriod
from .weekday import Weekday

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Whether per-diems are added, or subtracted to offset meals covered elsewhere."""

    ADD = 1
    SUBTRACT = -1

    @property
    def sign(self) -> int:
        return self.value


def _spans(period: TimePeriod) -> list[tuple[Weekday, Weekday]]:
    """Get the (first, last) day of every line to emit, in chronological order."""
    if isinstance(period, AllWeekdays):
        return [(Weekday.MONDAY, Weekday.FRIDAY)]
    if isinstance(period, SingleDay):
        return [(period.day, period.day)]
    if isinstance(period, ContiguousRange):
        return [(period.start, period.end)]
    if isinstance(period, ArbitrarySet):
        return [(day, day) for day in period.days]
    raise TypeError(f"Unsupported time period: {period!r}")


def _comment(context: Context, start: FinancialDate, end: FinancialDate, num_days: int) -> str:
    if num_days == 1:
        return context.comment if context.comment else start.to_iso_string()

    span = f"{start} to {end}"
    if context.comment:
        return f"{span}, {context.comment}"
    return span


def _merchant(context: Context, kind: Kind, rate: Money, num_days: int) -> str:
    where = str(context.user.country)
    if context.destination is not None:
        where += f" to {context.destination}"
    return f"{num_days} * {where} {kind.label} @ {rate}"


def expand(
    context: Context,
    period: TimePeriod,
    kind: Kind,
    mode: Mode = Mode.ADD,
    rate_table: RateTable = DEFAULT_RATE_TABLE,
) -> list[TransactionListElement]:
    """
    Build the transaction lines for a per-diem claim.

    Args:
        context: User settings plus reference week, destination and comment
        period: Days of the reference week to claim
        kind: Per-diem category
        mode: ADD for a claim, SUBTRACT to negate every amount
        rate_table: Rates to resolve kind against

    Returns:
        Lines in chronological order

    Raises:
        UnsupportedRateCombination: If the rate table has no amount for the claim
        DateArithmeticOverflow: If a date of the reference week cannot be represented
    """
    user = context.user
    rate = Money(
        minor_units=rate_table.amount(kind, user.country, context.destination),
        currency=user.country.currency,
    )
    monday = context.monday_of_reference_date()

    elements = []
    for first, last in _spans(period):
        num_days = last.ordinal - first.ordinal + 1
        if num_days < 1:
            raise RuntimeError(f"Invariant violated: span {first}-{last} covers {num_days} days")

        start = first.date_from(monday)
        end = last.date_from(monday)
        element = TransactionListElement(
            created=start.to_iso_string(),
            currency=user.country.currency.code,
            merchant=_merchant(context, kind, rate, num_days),
            amount=(rate * num_days * mode.sign).to_minor_units(),
            category=user.categories.per_diems.name,
            tag=user.travel_tag,
            billable=user.tags.travel.billable,
            reimbursable=True,
            comment=_comment(context, start, end, num_days),
        )
        logger.debug(f"Per diem line {element.created}: {element.merchant} = {element.amount}")
        elements.append(element)

    logger.info(f"Expanded '{period}' ({kind.value}, {mode.name.lower()}) into {len(elements)} transaction(s)")
    return elements


def transaction_list_from_per_diem(
    context: Context,
    period: TimePeriod,
    kind: Kind,
    mode: Mode = Mode.ADD,
    rate_table: RateTable = DEFAULT_RATE_TABLE,
) -> TransactionList:
    """Build the complete "expenses" payload for a per-diem claim."""
    return TransactionList(
        employee_email=context.user.email,
        transaction_list=tuple(expand(context, period, kind, mode, rate_table)),
    )
