"""Helpers for presenting schedules: sampled table rows, chart series, roll-ups."""

from __future__ import annotations

from typing import Dict, List

import pandas as pd

from amortization.config import CHART_SAMPLE_EVERY, MONTHS_PER_YEAR, TABLE_SAMPLE_EVERY
from amortization.schemas.schedule import GrowthResult, PeriodRecord, Schedule

SCHEDULE_COLUMNS = ["index", "due_date", "payment", "principal", "interest", "balance"]


def format_currency(amount: float) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_duration(periods: int) -> str:
    """Monthly period count as "2 years 3 months"."""
    years, months = divmod(periods, MONTHS_PER_YEAR)
    parts = []
    if years > 0:
        parts.append(f"{years} year" if years == 1 else f"{years} years")
    if months > 0:
        parts.append(f"{months} month" if months == 1 else f"{months} months")
    return " ".join(parts) or "Less than 1 month"


def sample_rows(
    schedule: Schedule,
    every: int = TABLE_SAMPLE_EVERY,
    show_all: bool = False,
) -> List[PeriodRecord]:
    """Rows for the schedule table.

    Unless ``show_all`` is set: the first row, every ``every``-th row, and the
    final row.
    """
    records = list(schedule.records)
    if show_all or not records:
        return records

    picked = [
        record
        for position, record in enumerate(records)
        if position == 0 or (position + 1) % every == 0
    ]
    if picked[-1] is not records[-1]:
        picked.append(records[-1])
    return picked


def chart_series(schedule: Schedule, every: int = CHART_SAMPLE_EVERY) -> Dict[str, List]:
    """Principal / interest / balance series sampled every ``every`` periods plus the last."""
    series: Dict[str, List] = {"labels": [], "principal": [], "interest": [], "balance": []}
    last = len(schedule) - 1
    for position, record in enumerate(schedule.records):
        if position % every == 0 or position == last:
            series["labels"].append(f"Payment {record.index}")
            series["principal"].append(record.principal)
            series["interest"].append(record.interest)
            series["balance"].append(record.balance)
    return series


def growth_series(result: GrowthResult) -> Dict[str, List]:
    """Balance against money deposited (initial balance included) per report."""
    return {
        "labels": [f"Year {record.index}" for record in result.records],
        "balance": [record.balance for record in result.records],
        "deposited": [result.initial_balance + record.total_contributions for record in result.records],
        "interest": [record.total_interest for record in result.records],
    }


def schedule_frame(schedule: Schedule) -> pd.DataFrame:
    """All records as a DataFrame, one row per period."""
    rows = [record.model_dump() for record in schedule.records]
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def yearly_rollup(schedule: Schedule) -> pd.DataFrame:
    """Per-year totals: summed payment/principal/interest and the year-end balance."""
    df = schedule_frame(schedule)
    if df.empty:
        return pd.DataFrame(columns=["year", "payment", "principal", "interest", "balance"])

    df["year"] = (df["index"] - 1) // MONTHS_PER_YEAR + 1
    agg = df.groupby("year").agg(
        payment=("payment", "sum"),
        principal=("principal", "sum"),
        interest=("interest", "sum"),
        balance=("balance", "last"),
    ).reset_index()
    return agg.round(2)
