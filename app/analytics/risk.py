"""
ACWR (Acute:Chronic Workload Ratio) risk indicators.

For every athlete the engine computes:

- **acute load** — training load summed over the last 7 days,
- **chronic load** — the 28-day sum divided by 4 (weekly equivalent),
- **ACWR** — acute / chronic, or 0 when there is no chronic load,
- **risk level** — ``low`` / ``moderate`` / ``high`` from the thresholds,
- **active injuries** — open injury records for the athlete,
- **trajectory** — whether this week's load moves the athlete towards or
  away from a safe ratio compared with the previous week.

The ACWR is a screening signal for rapid load increases, not an injury
predictor.  Thresholds are caller-configurable (see
:mod:`app.analytics.thresholds`).

Key design choices
------------------

1. **Single reference day** — ``as_of`` is read once per call so every
   window in a call sees the same "today".
2. **Input order preserved** — one indicator per athlete, same order as
   the input list; sorting is left to the presentation layer.
3. **Total over valid input** — athletes without loads or injuries get a
   zero-load, ``low`` indicator instead of an error.
"""

from __future__ import annotations

import datetime
import logging
from collections import Counter, defaultdict
from collections.abc import Sequence
from typing import Optional

from app.analytics.rounding import round_half_up
from app.analytics.thresholds import ThresholdsInput, resolve_thresholds
from app.analytics.windows import ACUTE_DAYS, compute_window_loads, sum_training_load, trailing_window
from app.schemas.athlete import Athlete
from app.schemas.daily_load import DailyLoad
from app.schemas.injury import Injury
from app.schemas.risk import RiskIndicator, RiskLevel, Trajectory
from app.schemas.thresholds import ThresholdSettings

logger = logging.getLogger(__name__)

# ======================================================================
# Trajectory bands (week-over-week load change, in percent)
# ======================================================================

# While the ACWR is elevated any sustained drop is an improvement.
_ELEVATED_IMPROVING_BELOW = -10.0
_ELEVATED_WORSENING_ABOVE = 10.0

# In the safe range small increases are normal progression.
_SAFE_IMPROVING_BELOW = -20.0
_SAFE_WORSENING_ABOVE = 30.0


# ======================================================================
# Classification
# ======================================================================


def _classify(acwr: float, cfg: ThresholdSettings) -> RiskLevel:
    """Map an ACWR to its tier; threshold values belong to the lower band."""
    if acwr > cfg.acwr_high:
        return "high"
    if acwr > cfg.acwr_moderate:
        return "moderate"
    return "low"


def compute_risk_level(acwr: float, thresholds: Optional[ThresholdsInput] = None) -> RiskLevel:
    """Return the risk tier for *acwr*.

    ``low`` if ``acwr <= acwr_moderate``, ``moderate`` up to and including
    ``acwr_high``, ``high`` above it.  Inverted thresholds do not raise;
    the moderate band is simply empty.
    """
    return _classify(acwr, resolve_thresholds(thresholds))


def compute_acwr(acute_load: float, chronic_load: float) -> float:
    """ACWR rounded to 2 decimals, 0 when there is no chronic load."""
    if chronic_load <= 0:
        return 0.0
    return max(round_half_up(acute_load / chronic_load, 2), 0.0)


def _compute_trajectory(acute_load: float, previous_load: float, acwr: float,
                        cfg: ThresholdSettings, ) -> Trajectory:
    """Compare this week's load with the previous 7 days."""
    if previous_load <= 0:
        return "stable"

    change = (acute_load - previous_load) / previous_load * 100.0

    if acwr > cfg.acwr_moderate:
        if change < _ELEVATED_IMPROVING_BELOW:
            return "improving"
        if change > _ELEVATED_WORSENING_ABOVE:
            return "worsening"
        return "stable"

    if change > _SAFE_WORSENING_ABOVE:
        return "worsening"
    if change < _SAFE_IMPROVING_BELOW:
        return "improving"
    return "stable"


# ======================================================================
# Main entry point
# ======================================================================


def compute_athlete_risk_indicators(athletes: Sequence[Athlete], daily_loads: Sequence[DailyLoad],
                                    injuries: Sequence[Injury], thresholds: Optional[ThresholdsInput] = None,
                                    as_of: Optional[datetime.date] = None, ) -> list[RiskIndicator]:
    """Build one :class:`RiskIndicator` per athlete.

    Args:
        athletes: Athletes to report on; output keeps this order and length.
        daily_loads: Load records for any athletes (others are ignored).
        injuries: Injury records for any athletes.
        thresholds: Optional (partial) thresholds.
        as_of: Reference day, defaults to today.

    Returns:
        List of indicators, ``len(result) == len(athletes)``.
    """
    cfg = resolve_thresholds(thresholds)
    ref_day = as_of or datetime.date.today()
    previous_window = trailing_window(ref_day, ACUTE_DAYS).previous()

    loads_by_athlete: dict[str, list[DailyLoad]] = defaultdict(list)
    for load in daily_loads:
        loads_by_athlete[load.athlete_id].append(load)

    active_by_athlete = Counter(injury.athlete_id for injury in injuries if injury.status == "active")

    indicators: list[RiskIndicator] = []
    for athlete in athletes:
        athlete_loads = loads_by_athlete.get(athlete.id, [])

        window_loads = compute_window_loads(athlete_loads, ref_day)
        acwr = compute_acwr(window_loads.acute_load, window_loads.chronic_load)
        previous_load = sum_training_load(athlete_loads, previous_window)

        indicators.append(RiskIndicator(athlete_id=athlete.id, athlete_name=athlete.name or "",
                                        acute_load=round_half_up(window_loads.acute_load, 2),
                                        chronic_load=round_half_up(window_loads.chronic_load, 2), acwr=acwr,
                                        risk_level=_classify(acwr, cfg),
                                        active_injuries=active_by_athlete.get(athlete.id, 0),
                                        trajectory=_compute_trajectory(window_loads.acute_load, previous_load,
                                                                       acwr, cfg), ))

    logger.debug("Computed %d risk indicators as of %s (%d loads, %d injuries)", len(indicators), ref_day,
                 len(daily_loads), len(injuries), )
    return indicators
