"""Retirement savings projection."""

from __future__ import annotations

import logging

from amortization.config import (
    CAUTION_MONTHLY_INCOME,
    MONTHS_PER_YEAR,
    ON_TRACK_MONTHLY_INCOME,
    SAFE_WITHDRAWAL_RATE,
)
from amortization.core.growth import project_growth
from amortization.models import GrowthParameters, RetirementPlan
from amortization.schemas.calculators import RetirementProjection, RetirementStatus
from amortization.schemas.schedule import GrowthRecord

logger = logging.getLogger(__name__)


def future_value(present_value: float, payment: float, periodic_rate: float, periods: int) -> float:
    """FV = PV(1+r)^n + PMT * [((1+r)^n - 1) / r], payments at period end."""
    if periodic_rate == 0:
        return present_value + payment * periods
    growth = (1 + periodic_rate) ** periods
    return present_value * growth + payment * ((growth - 1) / periodic_rate)


def readiness(monthly_income_real: float) -> RetirementStatus:
    if monthly_income_real >= ON_TRACK_MONTHLY_INCOME:
        return RetirementStatus.ON_TRACK
    if monthly_income_real >= CAUTION_MONTHLY_INCOME:
        return RetirementStatus.CAUTION
    return RetirementStatus.BEHIND


def project_retirement(plan: RetirementPlan) -> RetirementProjection:
    """
    Project savings to retirement age with monthly compounding.

      - projected_savings is the closed-form future value; the yearly rows come
        from stepping the same recurrence month by month (year 0 = today)
      - the real value deflates by annual inflation over the whole horizon
      - income follows the safe-withdrawal rule (4% of the pot per year)
      - total_contributions includes current savings
    """
    years = plan.years_to_retirement
    months = years * MONTHS_PER_YEAR
    monthly_return = plan.expected_return / 100.0 / MONTHS_PER_YEAR

    projected = future_value(plan.current_savings, plan.monthly_contribution, monthly_return, months)
    projected_real = projected / (1 + plan.inflation_rate / 100.0) ** years

    monthly_income = projected * SAFE_WITHDRAWAL_RATE / MONTHS_PER_YEAR
    monthly_income_real = projected_real * SAFE_WITHDRAWAL_RATE / MONTHS_PER_YEAR
    total_contributions = plan.current_savings + plan.monthly_contribution * months

    growth = project_growth(
        GrowthParameters(
            initial_balance=plan.current_savings,
            periodic_contribution=plan.monthly_contribution,
            periodic_rate=monthly_return,
            period_count=months,
            contribution_timing="end",
            periods_per_report=MONTHS_PER_YEAR,
        )
    )
    today = GrowthRecord(
        index=0,
        contribution=0.0,
        interest=0.0,
        total_contributions=0.0,
        total_interest=0.0,
        balance=plan.current_savings,
    )

    status = readiness(monthly_income_real)
    logger.debug("retirement in %d years projects %.2f (%s)", years, projected, status.value)
    return RetirementProjection(
        years_to_retirement=years,
        projected_savings=projected,
        projected_savings_real=projected_real,
        monthly_income=monthly_income,
        monthly_income_real=monthly_income_real,
        total_contributions=total_contributions,
        total_growth=projected - total_contributions,
        status=status,
        yearly=(today,) + growth.records,
    )
