"""Loan amortization, payoff simulation and savings growth projections."""

from amortization.core.growth import compound_interest, project_growth, savings_growth
from amortization.core.loans import finance_vehicle, level_payment_loan
from amortization.core.payment import solve_payment, solve_period_count
from amortization.core.payoff import compare_payoffs, simulate_payoff
from amortization.core.retirement import project_retirement
from amortization.core.schedule import generate_schedule, summarize_schedule
from amortization.domain.engine import CalculationState, calculate, calculate_payload
from amortization.errors import EngineError, InvalidPeriodCount, PaymentBelowInterestFloor
from amortization.models import (
    GrowthParameters,
    LoanParameters,
    PayoffParameters,
    RetirementPlan,
    VehicleLoanQuote,
)
from amortization.schemas.schedule import PayoffStatus

__all__ = [
    "CalculationState",
    "EngineError",
    "GrowthParameters",
    "InvalidPeriodCount",
    "LoanParameters",
    "PaymentBelowInterestFloor",
    "PayoffParameters",
    "PayoffStatus",
    "RetirementPlan",
    "VehicleLoanQuote",
    "calculate",
    "calculate_payload",
    "compare_payoffs",
    "compound_interest",
    "finance_vehicle",
    "generate_schedule",
    "level_payment_loan",
    "project_growth",
    "project_retirement",
    "savings_growth",
    "simulate_payoff",
    "solve_payment",
    "solve_period_count",
    "summarize_schedule",
]
