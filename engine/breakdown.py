"""
Current-year cost per student, per group.

Lumpsum costs are spread over everyone enrolled in the activity's groups,
so a group's share is amount x group_count / applicable_students.
PerLeerling costs land on the group in full. Uses base (year-0) prices and
the unprogressed headcounts only.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from core.models import Activity, StudentCount, complete_snapshot
from core.schema import LUMPSUM
from core.utils import students_for_groups

from .results import GroupCost


def cost_per_student_per_group(
    activities: Sequence[Activity],
    counts: Sequence[StudentCount],
) -> Tuple[GroupCost, ...]:
    snapshot = complete_snapshot(counts)
    result = []
    for sc in snapshot:
        if sc.count == 0:
            result.append(GroupCost(sc.group, 0.0))
            continue

        group_cost = 0.0
        for activity in activities:
            if not activity.applies_to(sc.group):
                continue
            if activity.activity_type == LUMPSUM:
                applicable = students_for_groups(snapshot, activity.groups)
                if applicable > 0:
                    group_cost += activity.amount * sc.count / applicable
            else:
                group_cost += activity.amount * sc.count

        result.append(GroupCost(sc.group, group_cost / sc.count))
    return tuple(result)
