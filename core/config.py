"""
Forecast configuration.
Scenario assumptions live in core/models.py (ScenarioSettings); this is only
the engine's own tuning.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ForecastConfig:
    # minimum-contribution search interval (currency units per student)
    contribution_lower_bound: float = 0.0
    contribution_upper_bound: float = 200.0

    # bisection stops once high - low <= tolerance
    solver_tolerance: float = 0.5

    def __post_init__(self) -> None:
        if not self.solver_tolerance > 0:
            raise ValueError(f"solver_tolerance must be positive, got {self.solver_tolerance}")
        if self.contribution_upper_bound < self.contribution_lower_bound:
            raise ValueError(
                f"contribution_upper_bound ({self.contribution_upper_bound}) is below "
                f"contribution_lower_bound ({self.contribution_lower_bound})"
            )


DEFAULT_CONFIG = ForecastConfig()
