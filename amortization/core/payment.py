"""Level-payment solvers."""

from __future__ import annotations

import logging
import math

from amortization.errors import InvalidPeriodCount, PaymentBelowInterestFloor

logger = logging.getLogger(__name__)


def solve_payment(principal: float, periodic_rate: float, period_count: int) -> float:
    """Level payment that amortizes ``principal`` to zero over ``period_count`` periods.

    Uses the annuity formula PMT = P * [r(1+r)^n] / [(1+r)^n - 1]; a zero rate
    is plain linear amortization.
    """
    if period_count < 1:
        raise InvalidPeriodCount(period_count)

    if periodic_rate == 0:
        return principal / period_count

    growth = (1 + periodic_rate) ** period_count
    return principal * (periodic_rate * growth) / (growth - 1)


def solve_period_count(principal: float, periodic_rate: float, payment: float) -> int:
    """Whole number of periods a level ``payment`` needs to clear ``principal``.

    The last period may be a partial payment, so the result is rounded up.
    """
    floor = principal * periodic_rate
    if payment <= floor:
        raise PaymentBelowInterestFloor(payment, floor)

    if periodic_rate == 0:
        exact = principal / payment
    else:
        exact = -math.log(1 - floor / payment) / math.log(1 + periodic_rate)

    # 35.9999999 from float noise is 36 periods, not 37
    periods = math.ceil(round(exact, 9))
    logger.debug("payment %.2f clears %.2f in %d periods", payment, principal, periods)
    return max(periods, 1)
