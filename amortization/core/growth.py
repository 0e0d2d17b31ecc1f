"""Contribution-accumulation projections (compound interest, savings)."""

from __future__ import annotations

import logging
from typing import List

from amortization.config import MONTHS_PER_YEAR
from amortization.models import GrowthParameters
from amortization.schemas.schedule import GrowthRecord, GrowthResult

logger = logging.getLogger(__name__)


def project_growth(params: GrowthParameters) -> GrowthResult:
    """
    Grow ``initial_balance`` step by step.

    Order of operations (per step):
      - timing "start": deposit the contribution (in ``contributions_per_period``
        equal parts), then accrue interest on the whole balance
      - timing "end": accrue interest on the opening balance, then deposit

    Contributions and interest are accumulated separately. A record is emitted
    every ``periods_per_report`` steps and after the last step.
    """
    balance = float(params.initial_balance)
    total_contributions = 0.0
    total_interest = 0.0
    interval_contributions = 0.0
    interval_interest = 0.0
    deposit = params.periodic_contribution / params.contributions_per_period

    records: List[GrowthRecord] = []
    for step in range(1, params.period_count + 1):
        if params.contribution_timing == "start":
            for _ in range(params.contributions_per_period):
                balance += deposit
                interval_contributions += deposit
            interest = balance * params.periodic_rate
            balance += interest
        else:
            interest = balance * params.periodic_rate
            balance += interest
            balance += params.periodic_contribution
            interval_contributions += params.periodic_contribution

        interval_interest += interest

        if step % params.periods_per_report == 0 or step == params.period_count:
            total_contributions += interval_contributions
            total_interest += interval_interest
            records.append(
                GrowthRecord(
                    index=len(records) + 1,
                    contribution=interval_contributions,
                    interest=interval_interest,
                    total_contributions=total_contributions,
                    total_interest=total_interest,
                    balance=balance,
                )
            )
            interval_contributions = 0.0
            interval_interest = 0.0

    logger.debug(
        "projected %d steps (%s timing) into %d records",
        params.period_count,
        params.contribution_timing,
        len(records),
    )
    return GrowthResult(
        records=tuple(records),
        initial_balance=params.initial_balance,
        total_contributions=total_contributions,
        total_interest=total_interest,
        final_balance=balance,
    )


def compound_interest(
    principal: float,
    monthly_addition: float,
    annual_rate_pct: float,
    compounding_per_year: int,
    years: int,
) -> GrowthResult:
    """Compound-interest calculator: monthly deposits, interest per compounding period.

    The deposits falling inside a compounding period all land before that
    period's interest is applied. ``compounding_per_year`` must divide 12.
    """
    if compounding_per_year < 1 or MONTHS_PER_YEAR % compounding_per_year:
        raise ValueError(
            f"compounding_per_year must divide {MONTHS_PER_YEAR}, got {compounding_per_year}"
        )
    months_per_period = MONTHS_PER_YEAR // compounding_per_year

    return project_growth(
        GrowthParameters(
            initial_balance=principal,
            periodic_contribution=monthly_addition * months_per_period,
            periodic_rate=annual_rate_pct / 100.0 / compounding_per_year,
            period_count=years * compounding_per_year,
            contribution_timing="start",
            contributions_per_period=months_per_period,
            periods_per_report=compounding_per_year,
        )
    )


def savings_growth(
    initial_deposit: float,
    monthly_contribution: float,
    annual_rate_pct: float,
    years: int,
) -> GrowthResult:
    """Savings calculator: monthly compounding, deposit after each month's interest."""
    return project_growth(
        GrowthParameters(
            initial_balance=initial_deposit,
            periodic_contribution=monthly_contribution,
            periodic_rate=annual_rate_pct / 100.0 / MONTHS_PER_YEAR,
            period_count=years * MONTHS_PER_YEAR,
            contribution_timing="end",
            periods_per_report=MONTHS_PER_YEAR,
        )
    )
