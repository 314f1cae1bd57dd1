"""
Forecast summary — the handful of numbers and flags a treasurer acts on.

  Q1: "Does the reserve last?"            → depletion year, lowest reserve
  Q2: "Is the contribution high enough?"  → current vs. solved minimum
  Q3: "Is this year already a deficit?"   → year-0 balance
  Q4: "Can the solver be trusted?"        → minimum inside the search bound
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
import pandas as pd

from engine.results import Forecast


@dataclass
class ForecastSummary:
    """Structured summary of one forecast."""
    scenario_name: str
    first_year: int
    last_year: int

    # Reserve
    start_reserve: float
    final_reserve: float
    lowest_reserve: float
    lowest_reserve_year: int
    depletion_year: Optional[int]

    # Totals over the horizon
    total_income: float
    total_expense: float

    # Contribution
    contribution: float
    minimum_contribution: int
    contribution_gap: float  # minimum - current; positive means too low
    minimum_within_bound: bool

    flags: List[str] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Scenario", "Value": self.scenario_name, "Unit": ""},
            {"Metric": "Horizon", "Value": f"{self.first_year}-{self.last_year}", "Unit": "years"},
            {"Metric": "Start Reserve", "Value": f"{self.start_reserve:,.2f}", "Unit": "EUR"},
            {"Metric": "Final Reserve", "Value": f"{self.final_reserve:,.2f}", "Unit": "EUR"},
            {"Metric": "Lowest Reserve", "Value": f"{self.lowest_reserve:,.2f}", "Unit": "EUR"},
            {"Metric": "Lowest Reserve Year", "Value": str(self.lowest_reserve_year), "Unit": ""},
            {
                "Metric": "Depletion Year",
                "Value": str(self.depletion_year) if self.depletion_year is not None else "N/A",
                "Unit": "",
            },
            {"Metric": "Total Income", "Value": f"{self.total_income:,.2f}", "Unit": "EUR"},
            {"Metric": "Total Expense", "Value": f"{self.total_expense:,.2f}", "Unit": "EUR"},
            {"Metric": "Contribution", "Value": f"{self.contribution:,.2f}", "Unit": "EUR/student"},
            {"Metric": "Minimum Contribution", "Value": str(self.minimum_contribution), "Unit": "EUR/student"},
            {"Metric": "Contribution Gap", "Value": f"{self.contribution_gap:,.2f}", "Unit": "EUR/student"},
        ]
        if self.flags:
            rows.append({"Metric": "FLAGS", "Value": " | ".join(self.flags), "Unit": ""})
        return pd.DataFrame(rows)


def generate_forecast_summary(forecast: Forecast) -> ForecastSummary:
    """
    Summarize a forecast.

    Raises
    ------
    ValueError
        If the forecast has no simulated years (negative horizon).
    """
    if not forecast.years:
        raise ValueError("Forecast has no years to summarize.")

    settings = forecast.scenario.settings
    reserves = np.array([y.reserve for y in forecast.years], dtype=float)
    lowest_idx = int(np.argmin(reserves))

    contribution = float(settings.contribution)
    gap = forecast.minimum_contribution - contribution

    flags = []
    if forecast.depletion_year is not None:
        flags.append(f"RESERVE_DEPLETED: reserve negative from {forecast.depletion_year}")
    if gap > 0:
        flags.append(
            f"CONTRIBUTION_BELOW_MINIMUM: {contribution:.2f} < {forecast.minimum_contribution}"
        )
    if not forecast.minimum_contribution_within_bound:
        flags.append("MINIMUM_EXCEEDS_SEARCH_BOUND: no contribution in range sustains the reserve")
    if forecast.current_year.balance < 0:
        flags.append("STRUCTURAL_DEFICIT: current year spends more than it takes in")

    return ForecastSummary(
        scenario_name=forecast.scenario.name,
        first_year=forecast.years[0].year,
        last_year=forecast.years[-1].year,
        start_reserve=float(settings.start_reserve),
        final_reserve=float(reserves[-1]),
        lowest_reserve=float(reserves[lowest_idx]),
        lowest_reserve_year=forecast.years[lowest_idx].year,
        depletion_year=forecast.depletion_year,
        total_income=float(sum(y.income for y in forecast.years)),
        total_expense=float(sum(y.expense for y in forecast.years)),
        contribution=contribution,
        minimum_contribution=forecast.minimum_contribution,
        contribution_gap=gap,
        minimum_within_bound=forecast.minimum_contribution_within_bound,
        flags=flags,
    )
