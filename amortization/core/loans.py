"""Level-payment loan calculators (general loans, mortgages, vehicle loans)."""

from __future__ import annotations

import logging

from amortization.config import MONTHS_PER_YEAR
from amortization.core.payment import solve_payment, solve_period_count
from amortization.core.schedule import generate_schedule, summarize_schedule
from amortization.models import LoanParameters, VehicleLoanQuote
from amortization.schemas.calculators import LoanResult, VehicleLoanResult

logger = logging.getLogger(__name__)


def level_payment_loan(params: LoanParameters) -> LoanResult:
    """Solve whichever of payment / period count is missing, then amortize.

    When both are given the payment is used as-is and the last period settles
    whatever is left.
    """
    if params.number_of_periods is not None:
        period_count = params.number_of_periods
        payment = params.periodic_payment
        if payment is None:
            payment = solve_payment(params.principal, params.periodic_rate, period_count)
    else:
        payment = params.periodic_payment
        period_count = solve_period_count(params.principal, params.periodic_rate, payment)

    schedule = generate_schedule(
        params.principal,
        params.periodic_rate,
        payment,
        period_count,
        start_date=params.start_date,
    )
    return LoanResult(payment=payment, schedule=schedule, summary=summarize_schedule(schedule))


def finance_vehicle(quote: VehicleLoanQuote) -> VehicleLoanResult:
    """
    Auto loan: sales tax is charged on the price net of the trade-in and rolled
    into the amount financed.
    """
    sales_tax_amount = (quote.vehicle_price - quote.trade_in_value) * (quote.sales_tax_rate / 100.0)
    amount_financed = (
        quote.vehicle_price - quote.down_payment - quote.trade_in_value + sales_tax_amount
    )
    monthly_rate = quote.annual_rate / 100.0 / MONTHS_PER_YEAR

    payment = solve_payment(amount_financed, monthly_rate, quote.term_months)
    schedule = generate_schedule(
        amount_financed, monthly_rate, payment, quote.term_months, start_date=quote.start_date
    )
    summary = summarize_schedule(schedule)
    upfront_cost = quote.down_payment + quote.trade_in_value

    logger.debug("financing %.2f of a %.2f vehicle", amount_financed, quote.vehicle_price)
    return VehicleLoanResult(
        payment=payment,
        schedule=schedule,
        summary=summary,
        amount_financed=amount_financed,
        sales_tax_amount=sales_tax_amount,
        upfront_cost=upfront_cost,
        total_cost=summary.total_paid + upfront_cost,
    )
