"""
Default catalog, headcounts and settings, taken from the council's
2025/2026 budget spreadsheet, plus the three preset scenarios.
"""

from __future__ import annotations

import datetime as dt
import uuid
from dataclasses import replace
from typing import Dict, Optional, Tuple

from .models import Activity, Scenario, ScenarioSettings, StudentCount
from .schema import LUMPSUM, PER_STUDENT, STUDENT_GROUPS
from .utils import school_year_label

_ALL = STUDENT_GROUPS

DEFAULT_ACTIVITIES: Tuple[Activity, ...] = (
    Activity(400, "Onvoorzien/eenmalig", LUMPSUM, 300, _ALL),
    Activity(402, "Sinterklaas", LUMPSUM, 5900, _ALL),
    Activity(403, "Kerst", LUMPSUM, 1200, _ALL),
    Activity(404, "Meesters- en Juffendag", LUMPSUM, 2000, _ALL),
    Activity(405, "Avond4daagse", PER_STUDENT, 1, _ALL),
    Activity(406, "Pasen", PER_STUDENT, 3, _ALL),
    Activity(407, "Afscheidsboek", PER_STUDENT, 20, ("Groep 8",)),
    Activity(408, "Uitstapjes", LUMPSUM, 6000, _ALL),
    Activity(409, "Sportdag", LUMPSUM, 1000, _ALL),
    Activity(410, "Musical", LUMPSUM, 1500, ("Groep 8",)),
    Activity(411, "Fietsrally en eindfeest", LUMPSUM, 1000, _ALL),
    Activity(412, "Attenties", LUMPSUM, 300, _ALL),
    Activity(413, "Kamp groep 8", PER_STUDENT, 70, ("Groep 8",)),
    Activity(414, "Kamp groep 4-7", LUMPSUM, 14000, ("Groep 4", "Groep 5", "Groep 6", "Groep 7")),
    Activity(416, "IJsjes Laatste Lesweek", LUMPSUM, 800, _ALL),
    Activity(450, "Bankkosten", LUMPSUM, 1200, _ALL),
)

DEFAULT_STUDENT_COUNTS: Tuple[StudentCount, ...] = (
    StudentCount("Groep 0-2", 149),  # 6 classes combined
    StudentCount("Groep 3", 92),
    StudentCount("Groep 4", 84),
    StudentCount("Groep 5", 71),
    StudentCount("Groep 6", 62),
    StudentCount("Groep 7", 27),
    StudentCount("Groep 8", 57),
)

DEFAULT_SETTINGS = ScenarioSettings(
    contribution=75,
    payment_rate=80,
    inflation_rate=2,
    years_ahead=5,
    kindergarten_intake=65,
    start_reserve=19258.99,
    supplemental_activity_codes=(),
    supplemental_percentage=100,
)

PRESET_SCENARIOS: Dict[str, Dict] = {
    "conservatief": {
        "name": "Conservatief",
        "settings": replace(DEFAULT_SETTINGS, contribution=70, payment_rate=75, inflation_rate=3),
    },
    "realistisch": {
        "name": "Realistisch",
        "settings": DEFAULT_SETTINGS,
    },
    "optimistisch": {
        "name": "Optimistisch",
        "settings": replace(DEFAULT_SETTINGS, contribution=80, payment_rate=85, inflation_rate=1.5),
    },
}


def _now_iso() -> str:
    return dt.datetime.now(dt.timezone.utc).isoformat()


def create_default_scenario(
    name: str = "Standaard scenario",
    *,
    today: Optional[dt.date] = None,
) -> Scenario:
    """New active scenario with the default catalog, starting in the current school year."""
    year = (today or dt.date.today()).year
    return Scenario(
        id=str(uuid.uuid4()),
        name=name,
        school_year=school_year_label(year),
        created_at=_now_iso(),
        active=True,
        settings=DEFAULT_SETTINGS,
        student_counts=DEFAULT_STUDENT_COUNTS,
        activities=DEFAULT_ACTIVITIES,
    )


def create_preset_scenario(preset: str, *, today: Optional[dt.date] = None) -> Scenario:
    if preset not in PRESET_SCENARIOS:
        raise ValueError(f"Unknown preset {preset!r}; expected one of {sorted(PRESET_SCENARIOS)}")
    preset_def = PRESET_SCENARIOS[preset]
    base = create_default_scenario(preset_def["name"], today=today)
    return replace(base, settings=preset_def["settings"])


def clone_scenario(scenario: Scenario, new_name: str) -> Scenario:
    """Copy under a new identity; the clone starts inactive."""
    return replace(
        scenario,
        id=str(uuid.uuid4()),
        name=new_name,
        created_at=_now_iso(),
        active=False,
    )
