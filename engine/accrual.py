"""
Per-year income and expense accrual.

Key rules:
  1. Costs inflate by (1 + rate/100) ** year_index; year 0 is at base prices
  2. Lumpsum activities cost their amount, PerLeerling activities cost
     amount x students enrolled in the activity's groups
  3. Regular income = students x contribution x payment_rate/100
  4. Supplemental income = selected activity costs x percentage/100 x payment_rate/100
  5. Total expense covers every activity, selected for supplemental charge or not
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from core.models import Activity, StudentCount
from core.schema import LUMPSUM
from core.utils import students_for_groups, total_students

from .results import ActivityExpense

logger = logging.getLogger(__name__)


def inflation_factor(inflation_rate: float, year_index: int) -> float:
    return (1 + inflation_rate / 100) ** year_index


def activity_cost(
    activity: Activity,
    counts: Iterable[StudentCount],
    year_index: int,
    inflation_rate: float,
) -> float:
    factor = inflation_factor(inflation_rate, year_index)
    if activity.activity_type == LUMPSUM:
        return activity.amount * factor
    relevant = students_for_groups(counts, activity.groups)
    return relevant * activity.amount * factor


def calculate_expenses(
    activities: Sequence[Activity],
    counts: Sequence[StudentCount],
    year_index: int,
    inflation_rate: float,
) -> Tuple[float, Tuple[ActivityExpense, ...]]:
    """Total cost for the year plus the per-activity breakdown, in activity order."""
    per_activity = []
    total = 0.0
    for activity in activities:
        cost = activity_cost(activity, counts, year_index, inflation_rate)
        per_activity.append(ActivityExpense(activity=activity, cost=cost))
        total += cost
    return total, tuple(per_activity)


def contribution_income(n_students: int, contribution: float, payment_rate: float) -> float:
    return n_students * contribution * (payment_rate / 100)


def supplemental_income(
    activities: Sequence[Activity],
    counts: Sequence[StudentCount],
    activity_codes: Sequence[int],
    percentage: float,
    payment_rate: float,
    year_index: int,
    inflation_rate: float,
) -> float:
    """
    Extra income from charging part of selected activities to participants.
    Codes that match no activity are skipped.
    """
    if not activity_codes:
        return 0.0

    by_code = {}
    for activity in activities:
        by_code.setdefault(activity.code, activity)

    income = 0.0
    for code in activity_codes:
        activity = by_code.get(code)
        if activity is None:
            logger.debug("Supplemental charge refers to unknown activity code %s; skipped", code)
            continue
        cost = activity_cost(activity, counts, year_index, inflation_rate)
        income += cost * (percentage / 100) * (payment_rate / 100)
    return income


@dataclass(frozen=True)
class PeriodAccrual:
    """Income and expense for one simulated year."""
    total_students: int
    income_contribution: float
    income_supplemental: float
    expense: float
    expense_per_activity: Tuple[ActivityExpense, ...]

    @property
    def income(self) -> float:
        return self.income_contribution + self.income_supplemental

    @property
    def balance(self) -> float:
        return self.income - self.expense


def accrue_period(
    counts: Sequence[StudentCount],
    activities: Sequence[Activity],
    year_index: int,
    *,
    inflation_rate: float,
    contribution: float,
    payment_rate: float,
    supplemental_codes: Sequence[int] = (),
    supplemental_percentage: float = 100.0,
) -> PeriodAccrual:
    n_students = total_students(counts)
    expense, per_activity = calculate_expenses(activities, counts, year_index, inflation_rate)
    return PeriodAccrual(
        total_students=n_students,
        income_contribution=contribution_income(n_students, contribution, payment_rate),
        income_supplemental=supplemental_income(
            activities,
            counts,
            supplemental_codes,
            supplemental_percentage,
            payment_rate,
            year_index,
            inflation_rate,
        ),
        expense=expense,
        expense_per_activity=per_activity,
    )
