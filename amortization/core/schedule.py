"""Amortization schedule generation."""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from amortization.errors import InvalidPeriodCount
from amortization.schemas.schedule import PeriodRecord, Schedule, Summary

logger = logging.getLogger(__name__)


def period_date(start_date: Optional[date], index: int) -> Optional[date]:
    """Calendar date of period ``index`` (1-based); period 1 falls on ``start_date``.

    Months are added to the anchor rather than chained, so a Jan 31 anchor
    gives Feb 28 then Mar 31.
    """
    if start_date is None:
        return None
    return start_date + relativedelta(months=index - 1)


def generate_schedule(
    principal: float,
    periodic_rate: float,
    payment: float,
    period_count: int,
    start_date: Optional[date] = None,
) -> Schedule:
    """
    Build the period-by-period schedule for a debt paid with a fixed payment.

    Order of operations (per period):
      1) interest on the opening balance
      2) the rest of the payment reduces principal
      3) the balance is clamped at zero

    The last scheduled period always clears the balance, absorbing any
    floating-point residue. A payment large enough to clear the debt early
    ends the schedule at that period.
    """
    if period_count < 1:
        raise InvalidPeriodCount(period_count)

    balance = float(principal)
    records: List[PeriodRecord] = []

    for index in range(1, period_count + 1):
        interest = balance * periodic_rate
        principal_paid = min(payment - interest, balance)
        if index == period_count:
            principal_paid = balance

        balance -= principal_paid
        if balance < 0:
            balance = 0.0

        records.append(
            PeriodRecord(
                index=index,
                payment=interest + principal_paid,
                interest=interest,
                principal=principal_paid,
                balance=balance,
                due_date=period_date(start_date, index),
            )
        )
        if balance <= 0:
            break

    logger.debug(
        "scheduled %.2f at rate %.6f over %d of %d periods",
        principal,
        periodic_rate,
        len(records),
        period_count,
    )
    return Schedule(records=tuple(records))


def summarize_schedule(schedule: Schedule) -> Summary:
    """Totals for a completed schedule."""
    return Summary(
        total_paid=math.fsum(record.payment for record in schedule.records),
        total_interest=math.fsum(record.interest for record in schedule.records),
        period_count=len(schedule),
        payoff_date=schedule.records[-1].due_date if schedule.records else None,
    )
