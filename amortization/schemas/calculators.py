"""Result contracts for the calculator front-ends."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict

from amortization.schemas.schedule import GrowthRecord, Schedule, Summary


class LoanResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    payment: float
    schedule: Schedule
    summary: Summary


class VehicleLoanResult(LoanResult):
    amount_financed: float
    sales_tax_amount: float
    upfront_cost: float
    total_cost: float


class RetirementStatus(str, Enum):
    ON_TRACK = "on_track"
    CAUTION = "caution"
    BEHIND = "behind"


class RetirementProjection(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    years_to_retirement: int
    projected_savings: float
    projected_savings_real: float
    monthly_income: float
    monthly_income_real: float
    total_contributions: float
    total_growth: float
    status: RetirementStatus
    yearly: Tuple[GrowthRecord, ...]
