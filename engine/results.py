"""
Forecast result types. Produced by the runner only and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import pandas as pd

from core.models import Activity, Scenario, StudentCount


@dataclass(frozen=True)
class ActivityExpense:
    activity: Activity
    cost: float


@dataclass(frozen=True)
class GroupCost:
    """Normalized cost per student for one group, at year-0 prices."""
    group: str
    cost: float


@dataclass(frozen=True)
class ContributionSolution:
    contribution: int
    # False when even the search's upper bound leaves the final reserve negative
    within_bound: bool


@dataclass(frozen=True)
class YearForecast:
    year: int
    school_year: str
    student_counts: Tuple[StudentCount, ...]  # before progression to next year
    total_students: int
    income: float
    income_contribution: float
    income_supplemental: float
    expense: float
    balance: float                             # income - expense
    reserve: float                             # cumulative, after this year
    expense_per_activity: Tuple[ActivityExpense, ...]


@dataclass(frozen=True)
class Forecast:
    scenario: Scenario
    years: Tuple[YearForecast, ...]
    depletion_year: Optional[int]
    minimum_contribution: int
    minimum_contribution_within_bound: bool
    cost_per_student_per_group: Tuple[GroupCost, ...]

    @property
    def current_year(self) -> YearForecast:
        return self.years[0]

    @property
    def final_reserve(self) -> float:
        return self.years[-1].reserve

    def to_dataframe(self) -> pd.DataFrame:
        """One row per simulated year."""
        return pd.DataFrame([
            {
                "year": y.year,
                "school_year": y.school_year,
                "total_students": y.total_students,
                "income_contribution": y.income_contribution,
                "income_supplemental": y.income_supplemental,
                "income": y.income,
                "expense": y.expense,
                "balance": y.balance,
                "reserve": y.reserve,
            }
            for y in self.years
        ])

    def expenses_dataframe(self) -> pd.DataFrame:
        """Activity x year cost matrix."""
        rows = []
        for y in self.years:
            for item in y.expense_per_activity:
                rows.append({
                    "year": y.year,
                    "code": item.activity.code,
                    "activity": item.activity.name,
                    "cost": item.cost,
                })
        if not rows:
            return pd.DataFrame(columns=["code", "activity"])
        return (
            pd.DataFrame(rows)
            .pivot_table(index=["code", "activity"], columns="year", values="cost", aggfunc="sum")
            .reset_index()
        )
