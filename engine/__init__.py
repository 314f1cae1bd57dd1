"""
Forecast engine — cohort progression, yearly accrual, reserve projection and
the minimum-contribution solver.
"""

from .runner import calculate_forecast
from .solver import find_minimum_contribution, solve_minimum_contribution
from .cohort import progress_students
from .results import Forecast, YearForecast

__all__ = [
    "calculate_forecast",
    "find_minimum_contribution",
    "solve_minimum_contribution",
    "progress_students",
    "Forecast",
    "YearForecast",
]
