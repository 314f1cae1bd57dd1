"""
Read-only queries used by presentation code alongside the forecast.

All prices are year-0 (uninflated). Unknown activity codes are ignored.
"""

from __future__ import annotations

from typing import List, Sequence

from core.models import Activity, StudentCount
from core.schema import STUDENT_GROUPS
from core.utils import students_for_groups
from engine.accrual import activity_cost
from engine.breakdown import cost_per_student_per_group


def _selected(activities: Sequence[Activity], codes: Sequence[int]) -> List[Activity]:
    by_code = {}
    for activity in activities:
        by_code.setdefault(activity.code, activity)
    return [by_code[c] for c in codes if c in by_code]


def supplemental_activities_cost(
    activities: Sequence[Activity],
    counts: Sequence[StudentCount],
    codes: Sequence[int],
) -> float:
    """Total year-0 cost of the selected activities."""
    return sum(activity_cost(a, counts, 0, 0) for a in _selected(activities, codes))


def supplemental_participants(
    activities: Sequence[Activity],
    counts: Sequence[StudentCount],
    codes: Sequence[int],
) -> int:
    """Students in the union of the selected activities' groups, each counted once."""
    groups = set()
    for activity in _selected(activities, codes):
        groups.update(activity.groups)
    return students_for_groups(counts, [g for g in STUDENT_GROUPS if g in groups])


def supplemental_per_student(
    activities: Sequence[Activity],
    counts: Sequence[StudentCount],
    codes: Sequence[int],
) -> float:
    """Year-0 cost of the selected activities divided over their participants."""
    participants = supplemental_participants(activities, counts, codes)
    if participants == 0:
        return 0.0
    return supplemental_activities_cost(activities, counts, codes) / participants


__all__ = [
    "students_for_groups",
    "supplemental_activities_cost",
    "supplemental_participants",
    "supplemental_per_student",
    "cost_per_student_per_group",
]
