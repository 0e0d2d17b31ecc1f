from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import Field, TypeAdapter

from amortization.config import TABLE_SAMPLE_EVERY
from amortization.core.growth import project_growth
from amortization.core.loans import level_payment_loan
from amortization.core.payoff import compare_payoffs, simulate_payoff
from amortization.core.reporting import sample_rows
from amortization.models import GrowthParameters, LoanParameters, PayoffParameters
from amortization.schemas.calculators import LoanResult
from amortization.schemas.schedule import (
    GrowthRecord,
    GrowthResult,
    PayoffComparison,
    PayoffResult,
    PeriodRecord,
)

logger = logging.getLogger(__name__)


class AmortizeRequest(LoanParameters):
    mode: Literal["amortize"] = "amortize"


class PayoffRequest(PayoffParameters):
    """Fixed-payment payoff; a positive ``extra_payment`` adds a minimum-only comparison."""

    mode: Literal["payoff"] = "payoff"
    extra_payment: float = Field(default=0.0, ge=0)


class GrowthRequest(GrowthParameters):
    mode: Literal["grow"] = "grow"


CalculationRequest = Annotated[
    Union[AmortizeRequest, PayoffRequest, GrowthRequest],
    Field(discriminator="mode"),
]
CalculationResult = Union[LoanResult, PayoffResult, PayoffComparison, GrowthResult]

_request_adapter: TypeAdapter = TypeAdapter(CalculationRequest)


def calculate(request: CalculationRequest) -> CalculationResult:
    """Run one calculation. Holds no state between calls."""
    logger.debug("calculating %s", request.mode)

    if isinstance(request, AmortizeRequest):
        return level_payment_loan(request)

    if isinstance(request, PayoffRequest):
        if request.extra_payment > 0:
            return compare_payoffs(
                request.balance,
                request.periodic_rate,
                request.payment,
                request.extra_payment,
                start_date=request.start_date,
            )
        return simulate_payoff(
            request.balance,
            request.periodic_rate,
            request.payment,
            start_date=request.start_date,
        )

    if isinstance(request, GrowthRequest):
        return project_growth(request)

    raise TypeError(f"unsupported calculation request: {type(request).__name__}")


def calculate_payload(payload: Dict[str, Any]) -> CalculationResult:
    """Validate a plain mapping (dispatching on its ``mode`` key) and calculate.

    Raises ``pydantic.ValidationError`` for malformed input.
    """
    request = _request_adapter.validate_python(payload)
    return calculate(request)


@dataclass
class CalculationState:
    """Caller-held view state: the last result and the table toggle.

    Lets a view re-render (e.g. flip "show all periods") without recalculating.
    """

    result: Optional[CalculationResult] = None
    show_all: bool = False
    sample_every: int = TABLE_SAMPLE_EVERY

    def update(self, request: CalculationRequest) -> CalculationResult:
        self.result = calculate(request)
        return self.result

    def table_rows(self) -> List[Union[PeriodRecord, GrowthRecord]]:
        result = self.result
        if result is None:
            return []
        if isinstance(result, GrowthResult):
            return list(result.records)
        if isinstance(result, PayoffComparison):
            result = result.accelerated
        return sample_rows(result.schedule, every=self.sample_every, show_all=self.show_all)
