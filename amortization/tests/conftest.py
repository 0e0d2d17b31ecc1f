from __future__ import annotations

import pytest

from amortization.core.payment import solve_payment
from amortization.core.schedule import generate_schedule
from amortization.schemas.schedule import Schedule


@pytest.fixture()
def car_loan_schedule() -> Schedule:
    """20k over 36 months at 6% APR."""
    payment = solve_payment(20000.0, 0.005, 36)
    return generate_schedule(20000.0, 0.005, payment, 36)


@pytest.fixture()
def linear_schedule() -> Schedule:
    """Zero-rate 3000 at 100 per period: 30 periods."""
    return generate_schedule(3000.0, 0.0, 100.0, 30)
