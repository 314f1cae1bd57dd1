"""
Minimum sustaining parent contribution — bisection over the contribution.

Invariant: `high` always keeps the final-year reserve non-negative (or is the
search's upper bound), `low` is the best confirmed failing value. Each trial
is a full, independent re-projection with only the contribution changed.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from core.config import DEFAULT_CONFIG, ForecastConfig
from core.models import Scenario

from .projection import project_final_reserve
from .results import ContributionSolution

logger = logging.getLogger(__name__)


def find_minimum_contribution(
    scenario: Scenario,
    config: Optional[ForecastConfig] = None,
) -> int:
    """
    Smallest whole contribution (rounded up) that ends the horizon with a
    non-negative reserve. Returns ceil(upper bound) when no value in the search
    interval suffices.
    """
    cfg = config or DEFAULT_CONFIG
    low = cfg.contribution_lower_bound
    high = cfg.contribution_upper_bound

    while high - low > cfg.solver_tolerance:
        mid = (low + high) / 2
        if project_final_reserve(scenario, contribution=mid) >= 0:
            high = mid
        else:
            low = mid

    return math.ceil(high)


def solve_minimum_contribution(
    scenario: Scenario,
    config: Optional[ForecastConfig] = None,
) -> ContributionSolution:
    """find_minimum_contribution plus whether the answer actually sustains the reserve."""
    cfg = config or DEFAULT_CONFIG
    contribution = find_minimum_contribution(scenario, cfg)

    within_bound = project_final_reserve(
        scenario, contribution=cfg.contribution_upper_bound
    ) >= 0
    if not within_bound:
        logger.warning(
            "Scenario %r: even a contribution of %.2f leaves a negative final reserve; "
            "reporting the search bound %d",
            scenario.name,
            cfg.contribution_upper_bound,
            contribution,
        )

    return ContributionSolution(contribution=contribution, within_bound=within_bound)
