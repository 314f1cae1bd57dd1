"""
Scenario value types.

Everything here is a frozen dataclass holding tuples, so a Scenario is an
immutable snapshot: the engine never mutates it and two scenarios never share
mutable state. Derive changed copies with dataclasses.replace() or the
with_* helpers.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, Optional, Tuple

from .schema import ACTIVITY_TYPES, STUDENT_GROUPS, ActivityType


@dataclass(frozen=True)
class StudentCount:
    group: str
    count: int


@dataclass(frozen=True)
class Activity:
    """
    One expense line. Lumpsum activities cost `amount` in total; PerLeerling
    activities cost `amount` for every student enrolled in `groups`.
    """

    code: int
    name: str
    activity_type: ActivityType
    amount: float
    groups: Tuple[str, ...] = STUDENT_GROUPS
    reach: Optional[str] = None  # legacy free-text field from the spreadsheet

    def __post_init__(self) -> None:
        if self.activity_type not in ACTIVITY_TYPES:
            raise ValueError(
                f"Unknown activity type {self.activity_type!r} for activity {self.code}; "
                f"expected one of {ACTIVITY_TYPES}"
            )
        object.__setattr__(self, "groups", tuple(self.groups))

    def applies_to(self, group: str) -> bool:
        return group in self.groups


@dataclass(frozen=True)
class ScenarioSettings:
    contribution: float              # annual parent contribution per student
    payment_rate: float              # percent of families that actually pay
    inflation_rate: float            # annual cost increase, percent
    years_ahead: int                 # forecast horizon, inclusive of year 0
    kindergarten_intake: int         # new entrants into the youngest group per year
    start_reserve: float
    supplemental_activity_codes: Tuple[int, ...] = ()
    supplemental_percentage: float = 100.0

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "supplemental_activity_codes", tuple(self.supplemental_activity_codes)
        )


def complete_snapshot(counts: Iterable[StudentCount]) -> Tuple[StudentCount, ...]:
    """
    Build a full cohort snapshot in canonical group order.
    Missing groups get 0; for a duplicated group the first entry wins.
    """
    by_group: Dict[str, int] = {}
    for sc in counts:
        if sc.group not in STUDENT_GROUPS:
            raise ValueError(f"Unknown student group: {sc.group!r}")
        by_group.setdefault(sc.group, sc.count)
    return tuple(StudentCount(g, by_group.get(g, 0)) for g in STUDENT_GROUPS)


@dataclass(frozen=True)
class Scenario:
    id: str
    name: str
    school_year: str                 # "2025/2026"; first year drives the calendar
    created_at: str                  # ISO timestamp
    active: bool
    settings: ScenarioSettings
    student_counts: Tuple[StudentCount, ...] = field(default_factory=tuple)
    activities: Tuple[Activity, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "student_counts", complete_snapshot(self.student_counts))
        object.__setattr__(self, "activities", tuple(self.activities))

    def with_settings(self, **changes) -> "Scenario":
        """Copy of this scenario with some settings replaced."""
        return replace(self, settings=replace(self.settings, **changes))

    def count_for(self, group: str) -> int:
        for sc in self.student_counts:
            if sc.group == group:
                return sc.count
        return 0

    def find_activity(self, code: int) -> Optional[Activity]:
        for activity in self.activities:
            if activity.code == code:
                return activity
        return None
