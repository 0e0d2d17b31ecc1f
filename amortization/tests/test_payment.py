from __future__ import annotations

from math import isclose

import pytest

from amortization.core.payment import solve_payment, solve_period_count
from amortization.errors import InvalidPeriodCount, PaymentBelowInterestFloor


def test_level_payment_matches_annuity_formula():
    payment = solve_payment(20000.0, 0.005, 36)
    assert isclose(payment, 608.44, abs_tol=0.005)


def test_zero_rate_is_linear():
    assert solve_payment(1200.0, 0.0, 12) == 100.0
    assert solve_payment(1000.0, 0.0, 3) == 1000.0 / 3


def test_single_period_repays_principal_plus_interest():
    assert isclose(solve_payment(1000.0, 0.01, 1), 1010.0, rel_tol=1e-12)


@pytest.mark.parametrize("period_count", [0, -12])
def test_non_positive_period_count_is_rejected(period_count):
    with pytest.raises(InvalidPeriodCount) as excinfo:
        solve_payment(1000.0, 0.01, period_count)
    assert excinfo.value.period_count == period_count


@pytest.mark.parametrize(
    "principal, rate, periods",
    [
        (20000.0, 0.005, 36),
        (250000.0, 0.065 / 12, 360),
        (5000.0, 0.0, 7),
        (1000.0, 0.01, 1),
    ],
)
def test_period_count_inverts_payment(principal, rate, periods):
    payment = solve_payment(principal, rate, periods)
    assert solve_period_count(principal, rate, payment) == periods


def test_period_count_rounds_partial_period_up():
    # 4.8 payments of 250
    assert solve_period_count(1200.0, 0.0, 250.0) == 5


def test_period_count_requires_payment_above_interest():
    with pytest.raises(PaymentBelowInterestFloor) as excinfo:
        solve_period_count(10000.0, 0.01, 100.0)
    assert isclose(excinfo.value.floor, 100.0)
