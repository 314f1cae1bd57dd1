"""
Input validation for scenarios before they reach the engine.

The engine computes a result for any numeric input; these checks decide what
the user is allowed to save. Catches:
- Negative money amounts and headcounts
- Percentages outside 0-100
- Horizons outside 1-15 years
- Empty, overlong or duplicate scenario names

Warnings are advisory and carry the "Waarschuwing:" prefix.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from core.models import Scenario, ScenarioSettings, StudentCount
from core.schema import WARNING_PREFIX

MIN_YEARS_AHEAD = 1
MAX_YEARS_AHEAD = 15
MAX_NAME_LENGTH = 100
LOW_CONTRIBUTION_WARNING = 50


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a scenario."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def extend(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_settings(settings: ScenarioSettings) -> ValidationResult:
    result = ValidationResult()

    # --- Contribution ---
    if settings.contribution < 0:
        result.errors.append("Ouderbijdrage kan niet negatief zijn")
    if settings.contribution < LOW_CONTRIBUTION_WARNING:
        result.warnings.append(f"{WARNING_PREFIX} Ouderbijdrage is ongebruikelijk laag")

    # --- Percentages ---
    if settings.payment_rate < 0 or settings.payment_rate > 100:
        result.errors.append("Betalingspercentage moet tussen 0 en 100 zijn")
    if settings.inflation_rate < 0:
        result.errors.append("Kostenstijging kan niet negatief zijn")

    # --- Horizon ---
    if settings.years_ahead < MIN_YEARS_AHEAD:
        result.errors.append(f"Minimaal {MIN_YEARS_AHEAD} jaar vooruit kijken")
    if settings.years_ahead > MAX_YEARS_AHEAD:
        result.errors.append(f"Maximaal {MAX_YEARS_AHEAD} jaar vooruit kijken")

    # --- Intake / reserve ---
    if settings.kindergarten_intake < 0:
        result.errors.append("Instroom kleuters kan niet negatief zijn")
    if settings.start_reserve < 0:
        result.errors.append("Start reserve kan niet negatief zijn")

    return result


def validate_scenario_name(name: str, existing_names: Iterable[str] = ()) -> ValidationResult:
    result = ValidationResult()
    stripped = (name or "").strip()

    if not stripped:
        result.errors.append("Scenario naam is verplicht")
    if len(stripped) > MAX_NAME_LENGTH:
        result.errors.append(f"Scenario naam mag maximaal {MAX_NAME_LENGTH} tekens zijn")
    if stripped and stripped in set(existing_names):
        result.errors.append("Er bestaat al een scenario met deze naam")

    return result


def validate_student_counts(counts: Iterable[StudentCount]) -> ValidationResult:
    result = ValidationResult()
    counts = list(counts)

    for sc in counts:
        if sc.count < 0:
            result.errors.append(f"Aantal leerlingen in {sc.group} kan niet negatief zijn")

    if sum(sc.count for sc in counts) == 0:
        result.errors.append("Er moet minimaal 1 leerling zijn")

    return result


def validate_scenario(scenario: Scenario, existing_names: Iterable[str] = ()) -> ValidationResult:
    """
    Run all checks on a scenario.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()
    result.extend(validate_scenario_name(scenario.name, existing_names))
    result.extend(validate_settings(scenario.settings))
    result.extend(validate_student_counts(scenario.student_counts))
    return result


def has_critical_errors(messages: Iterable[str]) -> bool:
    """True if any message is not a prefixed warning."""
    return any(not m.startswith(WARNING_PREFIX) for m in messages)
