"""Data contracts for engine output."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class PeriodRecord(BaseModel):
    """Single row of an amortization schedule."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    index: int = Field(..., ge=1)
    payment: float
    interest: float
    principal: float
    balance: float = Field(..., ge=0)
    due_date: Optional[date] = None


class Schedule(BaseModel):
    """Period records in chronological order."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    records: Tuple[PeriodRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, position: int) -> PeriodRecord:
        return self.records[position]

    @property
    def final_balance(self) -> float:
        return self.records[-1].balance if self.records else 0.0


class Summary(BaseModel):
    """Aggregate totals derived from a completed schedule."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    total_paid: float = Field(..., ge=0)
    total_interest: float = Field(..., ge=0)
    period_count: int = Field(..., ge=0)
    payoff_date: Optional[date] = None


class PayoffStatus(str, Enum):
    PAID_OFF = "paid_off"
    HORIZON_CAP_REACHED = "horizon_cap_reached"


class PayoffResult(BaseModel):
    """Outcome of a fixed-payment payoff simulation.

    ``HORIZON_CAP_REACHED`` is a normal outcome: the schedule stops at the cap
    and ``remaining_balance`` holds what is still owed.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: PayoffStatus
    payment: float
    schedule: Schedule
    summary: Summary
    remaining_balance: float = Field(..., ge=0)

    @property
    def paid_off(self) -> bool:
        return self.status is PayoffStatus.PAID_OFF


class PayoffComparison(BaseModel):
    """Minimum-only run against a minimum-plus-extra run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    baseline: PayoffResult
    accelerated: PayoffResult
    periods_saved: int
    interest_saved: float


class GrowthRecord(BaseModel):
    """One reporting interval of a growth projection.

    ``contribution`` and ``interest`` cover this interval only; the ``total_*``
    fields are running sums since the start (the initial balance excluded).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    index: int = Field(..., ge=0)
    contribution: float
    interest: float
    total_contributions: float
    total_interest: float
    balance: float


class GrowthResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    records: Tuple[GrowthRecord, ...]
    initial_balance: float
    total_contributions: float
    total_interest: float
    final_balance: float

    @property
    def total_deposited(self) -> float:
        """Initial balance plus every contribution."""
        return self.initial_balance + self.total_contributions

    @property
    def growth_percent(self) -> float:
        """Interest earned as a percentage of the money put in."""
        deposited = self.total_deposited
        return self.total_interest / deposited * 100.0 if deposited > 0 else 0.0

    @property
    def interest_share(self) -> float:
        """Interest as a percentage of the final balance."""
        return self.total_interest / self.final_balance * 100.0 if self.final_balance > 0 else 0.0
