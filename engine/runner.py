"""
Forecast runner — drives the yearly projection and assembles the Forecast.

Per simulated year (offset 0..years_ahead):
  1. accrue income and expense on the current, not yet progressed, headcounts
  2. carry the balance into the running reserve
  3. lock in the first calendar year the reserve drops below zero
  4. record a YearForecast
  5. progress the headcounts, except after the final year

Afterwards the minimum sustaining contribution is solved and the current-year
cost per student per group is computed.
"""

from __future__ import annotations

import logging
from typing import Optional

from core.config import ForecastConfig
from core.models import Scenario
from core.utils import parse_start_year, school_year_label

from .breakdown import cost_per_student_per_group
from .projection import iter_projection
from .results import Forecast, YearForecast
from .solver import solve_minimum_contribution

logger = logging.getLogger(__name__)


def calculate_forecast(
    scenario: Scenario,
    config: Optional[ForecastConfig] = None,
) -> Forecast:
    """
    Build the multi-year forecast for `scenario`.

    Never raises on numeric input: zero enrollment gives zero income and zero
    PerLeerling cost, a horizon of 0 gives a single year.
    """
    start_year = parse_start_year(scenario.school_year)

    years = []
    depletion_year: Optional[int] = None

    for projected in iter_projection(scenario):
        accrual = projected.accrual
        calendar_year = start_year + projected.year_index

        if projected.reserve < 0 and depletion_year is None:
            depletion_year = calendar_year

        years.append(
            YearForecast(
                year=calendar_year,
                school_year=school_year_label(start_year, projected.year_index),
                student_counts=projected.student_counts,
                total_students=accrual.total_students,
                income=accrual.income,
                income_contribution=accrual.income_contribution,
                income_supplemental=accrual.income_supplemental,
                expense=accrual.expense,
                balance=accrual.balance,
                reserve=projected.reserve,
                expense_per_activity=accrual.expense_per_activity,
            )
        )

    solution = solve_minimum_contribution(scenario, config)
    per_group = cost_per_student_per_group(scenario.activities, scenario.student_counts)

    logger.info(
        "Forecast %r: %d years from %s, depletion year %s, minimum contribution %d",
        scenario.name,
        len(years),
        scenario.school_year,
        depletion_year,
        solution.contribution,
    )

    return Forecast(
        scenario=scenario,
        years=tuple(years),
        depletion_year=depletion_year,
        minimum_contribution=solution.contribution,
        minimum_contribution_within_bound=solution.within_bound,
        cost_per_student_per_group=per_group,
    )
