"""
Reporting — secondary queries and the forecast summary.
"""

from .metrics import (
    cost_per_student_per_group,
    supplemental_activities_cost,
    supplemental_participants,
    supplemental_per_student,
)
from .summary import ForecastSummary, generate_forecast_summary

__all__ = [
    "cost_per_student_per_group",
    "supplemental_activities_cost",
    "supplemental_participants",
    "supplemental_per_student",
    "ForecastSummary",
    "generate_forecast_summary",
]
