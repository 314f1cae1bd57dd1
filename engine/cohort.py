"""
Cohort progression — advances a headcount snapshot by one school year.

"Groep 0-2" holds two cohort-years of kindergarteners, so each year half of it
moves on to "Groep 3" and half stays, joined by the new intake. Every other
group simply inherits the count of the group below it; "Groep 8" leaves the
school.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from core.models import StudentCount, complete_snapshot
from core.schema import STUDENT_GROUPS, YOUNGEST_GROUP
from core.utils import round_half_away_int

KINDERGARTEN_ADVANCE_SHARE = 0.5


def progress_students(
    counts: Iterable[StudentCount],
    kindergarten_intake: int,
) -> Tuple[StudentCount, ...]:
    """
    Return next year's snapshot, computed only from `counts` (no feedback
    between groups within one step). Inputs are assumed non-negative.
    """
    previous = complete_snapshot(counts)
    prev_by_group = {sc.group: sc.count for sc in previous}
    youngest = prev_by_group[YOUNGEST_GROUP]

    # both halves are rounded independently, so they may sum to youngest + 1
    staying = round_half_away_int(youngest * KINDERGARTEN_ADVANCE_SHARE)
    advancing = round_half_away_int(youngest * KINDERGARTEN_ADVANCE_SHARE)

    progressed = [
        StudentCount(STUDENT_GROUPS[0], staying + kindergarten_intake),
        StudentCount(STUDENT_GROUPS[1], advancing),
    ]
    for i in range(2, len(STUDENT_GROUPS)):
        progressed.append(
            StudentCount(STUDENT_GROUPS[i], prev_by_group[STUDENT_GROUPS[i - 1]])
        )
    return tuple(progressed)
