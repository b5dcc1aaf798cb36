#!/usr/bin/env python3
"""
Commands

The two things expend can post: a computed per-diem claim, or an arbitrary
payload read from a file. execute() builds the payload, lets a hook inspect
(or veto) it, and hands it to the sink exactly once.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Union

from .context.models import Context
from .perdiem.expander import Mode, transaction_list_from_per_diem
from .perdiem.rates import DEFAULT_RATE_TABLE, Kind, RateTable
from .perdiem.timeperiod import TimePeriod

logger = logging.getLogger(__name__)

# Expensify job type that creates expenses
CREATE_PAYLOAD_TYPE = "create"

Sink = Callable[[str, Any], Any]


@dataclass(frozen=True)
class PerDiemCommand:
    context: Context
    period: TimePeriod
    kind: Kind
    mode: Mode = Mode.ADD


@dataclass(frozen=True)
class PayloadCommand:
    payload_type: str
    payload: Any
    context: Context | None = None


Command = Union[PerDiemCommand, PayloadCommand]


def build_payload(command: Command, rate_table: RateTable = DEFAULT_RATE_TABLE) -> tuple[str, Any]:
    """
    Get the (payload type, JSON payload) a command would post.

    Raises:
        ExpendError: If the per-diem claim cannot be computed
    """
    if isinstance(command, PerDiemCommand):
        transactions = transaction_list_from_per_diem(
            command.context, command.period, command.kind, command.mode, rate_table
        )
        return CREATE_PAYLOAD_TYPE, transactions.to_dict()

    if command.context is None:
        return command.payload_type, command.payload
    return command.payload_type, command.context.user.apply_to_payload(command.payload)


def execute(
    command: Command,
    sink: Sink,
    pre_execute: Callable[[str, Any], None] | None = None,
    rate_table: RateTable = DEFAULT_RATE_TABLE,
) -> Any:
    """
    Build the command's payload and post it.

    Args:
        command: What to post
        sink: Called once as sink(payload_type, payload); its result is returned
        pre_execute: Called with the same arguments first; raise to abort
        rate_table: Rates for per-diem commands

    Returns:
        Whatever the sink returns
    """
    payload_type, payload = build_payload(command, rate_table)
    if pre_execute is not None:
        pre_execute(payload_type, payload)
    logger.debug(f"Handing '{payload_type}' payload to sink")
    return sink(payload_type, payload)
