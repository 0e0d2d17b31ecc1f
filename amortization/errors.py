"""Errors raised by the amortization engine."""

from __future__ import annotations


class EngineError(ValueError):
    """Base class for logically impossible calculation requests."""


class InvalidPeriodCount(EngineError):
    def __init__(self, period_count: int):
        super().__init__(f"period count must be at least 1, got {period_count}")
        self.period_count = period_count


class PaymentBelowInterestFloor(EngineError):
    """The payment never reduces the balance.

    ``floor`` is the first period's interest cost; a caller can present it as
    "you must pay more than $X".
    """

    def __init__(self, payment: float, floor: float):
        super().__init__(
            f"payment of ${payment:,.2f} does not cover the periodic interest of ${floor:,.2f}"
        )
        self.payment = payment
        self.floor = floor
