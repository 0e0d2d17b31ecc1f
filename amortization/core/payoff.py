"""Fixed-payment payoff simulation."""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from amortization.config import HORIZON_CAP, PAYOFF_EPSILON
from amortization.core.schedule import period_date, summarize_schedule
from amortization.errors import PaymentBelowInterestFloor
from amortization.schemas.schedule import (
    PayoffComparison,
    PayoffResult,
    PayoffStatus,
    PeriodRecord,
    Schedule,
)

logger = logging.getLogger(__name__)


def interest_floor(balance: float, periodic_rate: float) -> float:
    """First period's interest; a payment must exceed this to make progress."""
    return balance * periodic_rate


def simulate_payoff(
    balance: float,
    periodic_rate: float,
    payment: float,
    start_date: Optional[date] = None,
    horizon_cap: int = HORIZON_CAP,
) -> PayoffResult:
    """
    Pay ``payment`` every period until the balance is gone.

    The final payment is capped at what is owed. The run stops once the
    balance is within one cent of zero, or after ``horizon_cap`` periods; the
    latter is reported as ``PayoffStatus.HORIZON_CAP_REACHED``.
    """
    floor = interest_floor(balance, periodic_rate)
    if payment <= floor:
        raise PaymentBelowInterestFloor(payment, floor)

    remaining = float(balance)
    records: List[PeriodRecord] = []
    period = 0

    while remaining > PAYOFF_EPSILON and period < horizon_cap:
        period += 1
        interest = remaining * periodic_rate
        if payment >= remaining + interest:
            actual_payment = remaining + interest
            principal_paid = remaining
            remaining = 0.0
        else:
            actual_payment = payment
            principal_paid = actual_payment - interest
            remaining = max(0.0, remaining - principal_paid)

        records.append(
            PeriodRecord(
                index=period,
                payment=actual_payment,
                interest=interest,
                principal=principal_paid,
                balance=remaining,
                due_date=period_date(start_date, period),
            )
        )

    schedule = Schedule(records=tuple(records))
    status = PayoffStatus.PAID_OFF
    if remaining > PAYOFF_EPSILON:
        status = PayoffStatus.HORIZON_CAP_REACHED
        logger.info(
            "payment %.2f leaves %.2f owed after the %d period cap",
            payment,
            remaining,
            horizon_cap,
        )

    return PayoffResult(
        status=status,
        payment=payment,
        schedule=schedule,
        summary=summarize_schedule(schedule),
        remaining_balance=remaining,
    )


def compare_payoffs(
    balance: float,
    periodic_rate: float,
    minimum_payment: float,
    extra_payment: float,
    start_date: Optional[date] = None,
    horizon_cap: int = HORIZON_CAP,
) -> PayoffComparison:
    """Minimum-only payoff against minimum-plus-extra payoff.

    Both runs are independent simulations; the savings are their differences.
    """
    accelerated = simulate_payoff(
        balance, periodic_rate, minimum_payment + extra_payment, start_date, horizon_cap
    )
    baseline = simulate_payoff(balance, periodic_rate, minimum_payment, start_date, horizon_cap)

    return PayoffComparison(
        baseline=baseline,
        accelerated=accelerated,
        periods_saved=baseline.summary.period_count - accelerated.summary.period_count,
        interest_saved=baseline.summary.total_interest - accelerated.summary.total_interest,
    )
