from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from amortization.config import MONTHS_PER_YEAR

ContributionTiming = Literal["start", "end"]


class LoanParameters(BaseModel):
    """Debt to amortize. Supply a payment, a period count, or both."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    principal: float = Field(gt=0)
    periodic_rate: float = Field(ge=0)
    periodic_payment: Optional[float] = Field(default=None, gt=0)
    number_of_periods: Optional[int] = None
    start_date: Optional[date] = None

    @model_validator(mode="after")
    def ensure_solvable(self) -> "LoanParameters":
        if self.periodic_payment is None and self.number_of_periods is None:
            raise ValueError("either periodic_payment or number_of_periods is required")
        return self

    @classmethod
    def from_annual(
        cls,
        principal: float,
        annual_rate_pct: float,
        years: int,
        start_date: Optional[date] = None,
    ) -> "LoanParameters":
        """Monthly loan from an APR in percent and a term in years."""
        return cls(
            principal=principal,
            periodic_rate=annual_rate_pct / 100.0 / MONTHS_PER_YEAR,
            number_of_periods=years * MONTHS_PER_YEAR,
            start_date=start_date,
        )


class PayoffParameters(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    balance: float = Field(gt=0)
    periodic_rate: float = Field(ge=0)
    payment: float = Field(gt=0)
    start_date: Optional[date] = None


class GrowthParameters(BaseModel):
    """
    Balance growing through contributions and compounding.

      - contribution_timing: "start" adds the step's contribution before the
        step's interest is computed, "end" after it
      - contributions_per_period: the step's contribution is deposited in this
        many equal parts, all before interest ("start" timing only)
      - periods_per_report: internal steps per emitted record
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    initial_balance: float = Field(ge=0)
    periodic_contribution: float = Field(default=0.0, ge=0)
    periodic_rate: float = Field(ge=0)
    period_count: int = Field(ge=1)
    contribution_timing: ContributionTiming
    contributions_per_period: int = Field(default=1, ge=1)
    periods_per_report: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def ensure_smoothing_timing(self) -> "GrowthParameters":
        if self.contributions_per_period > 1 and self.contribution_timing != "start":
            raise ValueError("split contributions are only deposited before interest (timing 'start')")
        return self


class VehicleLoanQuote(BaseModel):
    """Auto loan inputs. Rates are percentages (6.5 means 6.5%)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    vehicle_price: float = Field(gt=0)
    down_payment: float = Field(default=0.0, ge=0)
    trade_in_value: float = Field(default=0.0, ge=0)
    sales_tax_rate: float = Field(default=0.0, ge=0, le=100)
    annual_rate: float = Field(ge=0)
    term_months: int = Field(ge=1)
    start_date: Optional[date] = None

    @model_validator(mode="after")
    def ensure_amount_financed(self) -> "VehicleLoanQuote":
        if self.down_payment + self.trade_in_value >= self.vehicle_price:
            raise ValueError("down payment and trade-in value cover the vehicle price, no loan needed")
        return self


class RetirementPlan(BaseModel):
    """Retirement inputs. Rates are annual percentages."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    current_age: int = Field(ge=0, le=120)
    retirement_age: int = Field(ge=1, le=120)
    current_savings: float = Field(default=0.0, ge=0)
    monthly_contribution: float = Field(default=0.0, ge=0)
    expected_return: float = Field(default=7.0, ge=0)
    inflation_rate: float = Field(default=3.0, ge=0)

    @model_validator(mode="after")
    def ensure_validity(self) -> "RetirementPlan":
        if self.retirement_age <= self.current_age:
            raise ValueError("retirement_age must be greater than current_age")
        return self

    @property
    def years_to_retirement(self) -> int:
        return self.retirement_age - self.current_age
