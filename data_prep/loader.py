"""
Scenario documents — the persisted JSON shape, with the Dutch field names the
council's exports use, mapped onto the core value types.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from core.models import Activity, Scenario, ScenarioSettings, StudentCount
from core.schema import ActivityType
from engine.results import Forecast


class _Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class StudentCountDoc(_Document):
    groep: str
    aantal: int


class ActivityDoc(_Document):
    code: int
    naam: str
    type: ActivityType
    bedrag: float
    groepen: List[str] = Field(default_factory=list)
    bereik: Optional[str] = None


class SettingsDoc(_Document):
    ouderbijdrage: float
    betalingspercentage: float
    kostenstijging: float
    jaren_vooruit: int = Field(alias="jarenVooruit")
    instroom_kleuters: int = Field(alias="instroomKleuters")
    start_reserve: float = Field(alias="startReserve")
    specifieke_bijdrage_activiteiten: List[int] = Field(
        default_factory=list, alias="specifiekeBijdrageActiviteiten"
    )
    specifieke_bijdrage_percentage: float = Field(100.0, alias="specifiekeBijdragePercentage")


class ScenarioDoc(_Document):
    id: str
    naam: str
    schooljaar: str
    datum_aangemaakt: str = Field(alias="datumAangemaakt")
    actief: bool
    instellingen: SettingsDoc
    leerlingaantallen: List[StudentCountDoc]
    activiteiten: List[ActivityDoc]


def scenario_from_dict(data: Dict[str, Any]) -> Scenario:
    """
    Parse one scenario document.
    Raises pydantic.ValidationError when required fields are missing or mistyped.
    """
    doc = ScenarioDoc.model_validate(data)
    s = doc.instellingen
    return Scenario(
        id=doc.id,
        name=doc.naam,
        school_year=doc.schooljaar,
        created_at=doc.datum_aangemaakt,
        active=doc.actief,
        settings=ScenarioSettings(
            contribution=s.ouderbijdrage,
            payment_rate=s.betalingspercentage,
            inflation_rate=s.kostenstijging,
            years_ahead=s.jaren_vooruit,
            kindergarten_intake=s.instroom_kleuters,
            start_reserve=s.start_reserve,
            supplemental_activity_codes=tuple(s.specifieke_bijdrage_activiteiten),
            supplemental_percentage=s.specifieke_bijdrage_percentage,
        ),
        student_counts=tuple(StudentCount(c.groep, c.aantal) for c in doc.leerlingaantallen),
        activities=tuple(
            Activity(
                code=a.code,
                name=a.naam,
                activity_type=a.type,
                amount=a.bedrag,
                groups=tuple(a.groepen),
                reach=a.bereik,
            )
            for a in doc.activiteiten
        ),
    )


def _activity_to_dict(activity: Activity) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "code": activity.code,
        "naam": activity.name,
        "type": activity.activity_type,
        "bedrag": activity.amount,
        "groepen": list(activity.groups),
    }
    if activity.reach is not None:
        out["bereik"] = activity.reach
    return out


def scenario_to_dict(scenario: Scenario) -> Dict[str, Any]:
    s = scenario.settings
    return {
        "id": scenario.id,
        "naam": scenario.name,
        "schooljaar": scenario.school_year,
        "datumAangemaakt": scenario.created_at,
        "actief": scenario.active,
        "instellingen": {
            "ouderbijdrage": s.contribution,
            "betalingspercentage": s.payment_rate,
            "kostenstijging": s.inflation_rate,
            "jarenVooruit": s.years_ahead,
            "instroomKleuters": s.kindergarten_intake,
            "startReserve": s.start_reserve,
            "specifiekeBijdrageActiviteiten": list(s.supplemental_activity_codes),
            "specifiekeBijdragePercentage": s.supplemental_percentage,
        },
        "leerlingaantallen": [{"groep": c.group, "aantal": c.count} for c in scenario.student_counts],
        "activiteiten": [_activity_to_dict(a) for a in scenario.activities],
    }


def forecast_to_dict(forecast: Forecast) -> Dict[str, Any]:
    return {
        "scenario": scenario_to_dict(forecast.scenario),
        "jaren": [
            {
                "jaar": y.year,
                "schooljaar": y.school_year,
                "leerlingaantallen": [{"groep": c.group, "aantal": c.count} for c in y.student_counts],
                "totaalLeerlingen": y.total_students,
                "inkomsten": y.income,
                "inkomstenOuderbijdrage": y.income_contribution,
                "inkomstenSpecifiekeBijdrage": y.income_supplemental,
                "uitgaven": y.expense,
                "saldo": y.balance,
                "reserve": y.reserve,
                "uitgavenPerActiviteit": [
                    {"activity": _activity_to_dict(e.activity), "kosten": e.cost}
                    for e in y.expense_per_activity
                ],
            }
            for y in forecast.years
        ],
        "reserveOpraakJaar": forecast.depletion_year,
        "minimaalBenodrigdeBijdrage": forecast.minimum_contribution,
        "minimumBinnenZoekgrens": forecast.minimum_contribution_within_bound,
        "kostenPerLeerlingPerGroep": [
            {"groep": g.group, "kosten": g.cost} for g in forecast.cost_per_student_per_group
        ],
    }


def load_scenario_json(path: Union[str, Path]) -> Scenario:
    """
    Load a scenario from a JSON file: either a bare scenario document or an
    export envelope holding `scenario` or a `scenarios` list (first one used).
    """
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)

    if isinstance(data, dict) and "scenario" in data:
        data = data["scenario"]
    elif isinstance(data, dict) and "scenarios" in data:
        scenarios = data["scenarios"]
        if not scenarios:
            raise ValueError(f"{path}: export contains no scenarios.")
        data = scenarios[0]

    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a scenario object.")
    return scenario_from_dict(data)
