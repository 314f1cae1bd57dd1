"""
Core package — student groups, scenario value types, default catalog,
configuration and shared helpers.
No forecast logic lives here.
"""

from .schema import STUDENT_GROUPS, LUMPSUM, PER_STUDENT
from .models import Activity, Scenario, ScenarioSettings, StudentCount, complete_snapshot
from .config import ForecastConfig
from .utils import round_half_away, students_for_groups, total_students

__all__ = [
    "STUDENT_GROUPS",
    "LUMPSUM",
    "PER_STUDENT",
    "Activity",
    "Scenario",
    "ScenarioSettings",
    "StudentCount",
    "complete_snapshot",
    "ForecastConfig",
    "round_half_away",
    "students_for_groups",
    "total_students",
]
