from __future__ import annotations

from datetime import date
from math import fsum, isclose

import pytest
from pydantic import ValidationError

from amortization.core.payment import solve_payment
from amortization.core.schedule import generate_schedule, period_date, summarize_schedule
from amortization.errors import InvalidPeriodCount


@pytest.mark.parametrize(
    "principal, rate, periods",
    [
        (1000.0, 0.01, 1),
        (20000.0, 0.005, 36),
        (250000.0, 0.065 / 12, 360),
        (5000.0, 0.0, 7),
        (1_000_000.0, 0.10 / 12, 480),
    ],
)
def test_level_payment_schedule_amortizes_to_zero(principal, rate, periods):
    payment = solve_payment(principal, rate, periods)
    schedule = generate_schedule(principal, rate, payment, periods)

    assert len(schedule) == periods
    assert schedule[-1].balance == 0.0
    assert isclose(fsum(r.principal for r in schedule.records), principal, rel_tol=1e-6)

    for position, record in enumerate(schedule.records, start=1):
        assert record.index == position
        assert record.balance >= 0
        assert isclose(record.interest + record.principal, record.payment, rel_tol=1e-9)
        assert isclose(record.payment, payment, rel_tol=1e-6)


def test_zero_rate_loan_has_no_interest():
    schedule = generate_schedule(1200.0, 0.0, 100.0, 12)

    assert [r.payment for r in schedule.records] == [100.0] * 12
    assert all(r.interest == 0 for r in schedule.records)
    assert schedule[-1].balance == 0.0


def test_scenario_totals(car_loan_schedule):
    summary = summarize_schedule(car_loan_schedule)

    assert summary.period_count == 36
    assert isclose(summary.total_interest, 1903.84, abs_tol=0.1)
    assert isclose(summary.total_paid, 20000.0 + summary.total_interest, rel_tol=1e-9)
    assert summary.payoff_date is None


def test_overpayment_ends_schedule_early():
    schedule = generate_schedule(1000.0, 0.0, 400.0, 12)

    assert [r.principal for r in schedule.records] == [400.0, 400.0, 200.0]
    assert schedule.final_balance == 0.0


def test_final_period_settles_residual_balance():
    # payment too small for the term: the last period settles the rest
    schedule = generate_schedule(1000.0, 0.0, 100.0, 3)

    assert schedule[-1].principal == 800.0
    assert schedule[-1].balance == 0.0


def test_calendar_anchor_uses_month_arithmetic():
    schedule = generate_schedule(1200.0, 0.0, 100.0, 3, start_date=date(2024, 1, 31))

    assert [r.due_date for r in schedule.records] == [
        date(2024, 1, 31),
        date(2024, 2, 29),
        date(2024, 3, 31),
    ]
    assert summarize_schedule(schedule).payoff_date == date(2024, 3, 31)


def test_period_date_without_anchor():
    assert period_date(None, 5) is None
    assert period_date(date(2023, 11, 1), 3) == date(2024, 1, 1)


def test_schedule_is_immutable(car_loan_schedule):
    with pytest.raises(ValidationError):
        car_loan_schedule.records[0].balance = 1.0  # type: ignore[misc]


def test_schedule_rejects_bad_period_count():
    with pytest.raises(InvalidPeriodCount):
        generate_schedule(1000.0, 0.01, 100.0, 0)
