from __future__ import annotations

from math import isclose

import pytest
from pydantic import ValidationError

from amortization.core.retirement import future_value, project_retirement, readiness
from amortization.models import RetirementPlan
from amortization.schemas.calculators import RetirementStatus


def test_yearly_rows_match_closed_form():
    plan = RetirementPlan(
        current_age=30,
        retirement_age=65,
        current_savings=10000.0,
        monthly_contribution=500.0,
        expected_return=7.0,
        inflation_rate=3.0,
    )
    projection = project_retirement(plan)

    assert projection.years_to_retirement == 35
    assert len(projection.yearly) == 36
    assert projection.yearly[0].balance == 10000.0
    assert isclose(projection.yearly[-1].balance, projection.projected_savings, rel_tol=1e-9)
    assert isclose(
        projection.projected_savings_real,
        projection.projected_savings / 1.03**35,
        rel_tol=1e-12,
    )
    assert isclose(projection.monthly_income, projection.projected_savings * 0.04 / 12, rel_tol=1e-12)
    assert projection.total_contributions == 10000.0 + 500.0 * 420


def test_zero_return_has_no_growth():
    plan = RetirementPlan(
        current_age=40,
        retirement_age=50,
        current_savings=1000.0,
        monthly_contribution=100.0,
        expected_return=0.0,
        inflation_rate=0.0,
    )
    projection = project_retirement(plan)

    assert projection.projected_savings == 13000.0
    assert projection.total_growth == 0.0
    assert projection.projected_savings_real == 13000.0
    assert projection.status is RetirementStatus.BEHIND


def test_future_value_zero_rate():
    assert future_value(100.0, 10.0, 0.0, 12) == 220.0


@pytest.mark.parametrize(
    "income, status",
    [
        (3000.0, RetirementStatus.ON_TRACK),
        (2999.99, RetirementStatus.CAUTION),
        (1500.0, RetirementStatus.CAUTION),
        (1499.99, RetirementStatus.BEHIND),
    ],
)
def test_readiness_thresholds(income, status):
    assert readiness(income) is status


def test_retirement_age_must_follow_current_age():
    with pytest.raises(ValidationError):
        RetirementPlan(current_age=65, retirement_age=60)
