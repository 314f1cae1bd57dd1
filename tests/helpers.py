from dataclasses import replace

from core.defaults import DEFAULT_ACTIVITIES, DEFAULT_SETTINGS, DEFAULT_STUDENT_COUNTS
from core.models import Scenario, StudentCount
from core.schema import STUDENT_GROUPS


def make_counts(values):
    return tuple(StudentCount(g, v) for g, v in zip(STUDENT_GROUPS, values))


def make_scenario(
    *,
    counts=DEFAULT_STUDENT_COUNTS,
    activities=DEFAULT_ACTIVITIES,
    school_year="2025/2026",
    **settings,
) -> Scenario:
    return Scenario(
        id="test-scenario",
        name="Test",
        school_year=school_year,
        created_at="2025-09-01T00:00:00+00:00",
        active=True,
        settings=replace(DEFAULT_SETTINGS, **settings),
        student_counts=tuple(counts),
        activities=tuple(activities),
    )
