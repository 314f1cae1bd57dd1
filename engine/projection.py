"""
The year-by-year reserve loop shared by the forecast runner and the
minimum-contribution solver. Every call starts from fresh state (scenario
counts and start reserve), so repeated trials never interfere.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from core.models import Scenario, StudentCount

from .accrual import PeriodAccrual, accrue_period
from .cohort import progress_students


@dataclass(frozen=True)
class ProjectedYear:
    year_index: int
    student_counts: Tuple[StudentCount, ...]
    accrual: PeriodAccrual
    reserve: float


def iter_projection(
    scenario: Scenario,
    *,
    contribution: Optional[float] = None,
) -> Iterator[ProjectedYear]:
    """
    Yield years 0..years_ahead (inclusive). `contribution` overrides the
    scenario's parent contribution; every other setting is taken as-is.
    """
    s = scenario.settings
    rate = s.contribution if contribution is None else contribution

    reserve = s.start_reserve
    counts = scenario.student_counts

    for year_index in range(s.years_ahead + 1):
        accrual = accrue_period(
            counts,
            scenario.activities,
            year_index,
            inflation_rate=s.inflation_rate,
            contribution=rate,
            payment_rate=s.payment_rate,
            supplemental_codes=s.supplemental_activity_codes,
            supplemental_percentage=s.supplemental_percentage,
        )
        reserve += accrual.balance

        yield ProjectedYear(
            year_index=year_index,
            student_counts=counts,
            accrual=accrual,
            reserve=reserve,
        )

        if year_index < s.years_ahead:
            counts = progress_students(counts, s.kindergarten_intake)


def project_final_reserve(scenario: Scenario, contribution: Optional[float] = None) -> float:
    """Reserve after the last simulated year."""
    reserve = scenario.settings.start_reserve
    for projected in iter_projection(scenario, contribution=contribution):
        reserve = projected.reserve
    return reserve
