"""
Data preparation — reading and writing scenario documents, validation.
"""

from .loader import (
    scenario_from_dict,
    scenario_to_dict,
    forecast_to_dict,
    load_scenario_json,
)
from .validators import (
    ValidationResult,
    validate_settings,
    validate_scenario_name,
    validate_student_counts,
    validate_scenario,
    has_critical_errors,
)

__all__ = [
    "scenario_from_dict",
    "scenario_to_dict",
    "forecast_to_dict",
    "load_scenario_json",
    "ValidationResult",
    "validate_settings",
    "validate_scenario_name",
    "validate_student_counts",
    "validate_scenario",
    "has_critical_errors",
]
