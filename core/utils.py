from __future__ import annotations

import datetime as dt
import re
from typing import Iterable, Optional

import numpy as np

from .models import StudentCount

_START_YEAR_RE = re.compile(r"^(\d{4})")


def round_half_away(x, decimals: int = 0):
    """Excel ROUND: half away from zero (vectorized)."""
    m = 10 ** decimals
    x = np.asarray(x, dtype=float)
    return np.sign(x) * (np.floor(np.abs(x) * m + 0.5) / m)


def round_half_away_int(x: float) -> int:
    """Scalar round_half_away to a whole number of students."""
    return int(round_half_away(x, 0))


def parse_start_year(school_year: str, *, today: Optional[dt.date] = None) -> int:
    """
    First calendar year of a "YYYY/YYYY+1" label.
    Labels without four leading digits fall back to the current year.
    """
    match = _START_YEAR_RE.match(school_year or "")
    if match:
        return int(match.group(1))
    return (today or dt.date.today()).year


def school_year_label(start_year: int, year_offset: int = 0) -> str:
    year = start_year + year_offset
    return f"{year}/{year + 1}"


def total_students(counts: Iterable[StudentCount]) -> int:
    return sum(sc.count for sc in counts)


def students_for_groups(counts: Iterable[StudentCount], groups: Iterable[str]) -> int:
    """Enrollment summed over the given subset of groups."""
    wanted = set(groups)
    return sum(sc.count for sc in counts if sc.group in wanted)
