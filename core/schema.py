from __future__ import annotations

from typing import Literal, Tuple

# Canonical student groups of a Dutch primary school, youngest first.
# "Groep 0-2" spans two cohort-years; every other group is a single grade.
# Progression moves students strictly up this sequence.
STUDENT_GROUPS: Tuple[str, ...] = (
    "Groep 0-2",
    "Groep 3",
    "Groep 4",
    "Groep 5",
    "Groep 6",
    "Groep 7",
    "Groep 8",
)

YOUNGEST_GROUP: str = STUDENT_GROUPS[0]
OLDEST_GROUP: str = STUDENT_GROUPS[-1]

ActivityType = Literal["Lumpsum", "PerLeerling"]

LUMPSUM: ActivityType = "Lumpsum"
PER_STUDENT: ActivityType = "PerLeerling"

ACTIVITY_TYPES: Tuple[str, ...] = (LUMPSUM, PER_STUDENT)

# Validation messages starting with this prefix are advisory, never blocking.
WARNING_PREFIX: str = "Waarschuwing:"
