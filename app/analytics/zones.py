"""
Training load zones.

Each calendar day of the trailing window is classified against the mean
and population standard deviation of all positive session loads in the
history.  Days without sessions are emitted as ``rest`` so the series is
gap-free.  Multiple sessions on the same day are summed.

With fewer than three positive loads the statistics are meaningless:
the recent sessions are returned as ``optimal`` instead.
"""

from __future__ import annotations

import datetime
import logging
import statistics
from collections.abc import Iterable
from typing import Optional

from app.analytics.thresholds import ThresholdsInput, resolve_thresholds
from app.analytics.windows import in_window, trailing_window
from app.schemas.daily_load import DailyLoad
from app.schemas.trends import LoadZone, LoadZoneDay, LoadZoneResult

logger = logging.getLogger(__name__)

MIN_LOADS_FOR_ZONES = 3


def _classify_load(load: float, mean: float, stdev: float) -> LoadZone:
    if load == 0:
        return "rest"
    if load < mean - stdev:
        return "low"
    if load <= mean + stdev:
        return "optimal"
    if load <= mean + 2 * stdev:
        return "high"
    return "danger"


def compute_load_zones(loads: Iterable[DailyLoad], days: Optional[int] = None, as_of: Optional[datetime.date] = None,
                       thresholds: Optional[ThresholdsInput] = None, ) -> LoadZoneResult:
    """Classify each of the last ``days`` days (``as_of`` included) into a zone.

    Args:
        loads: Full load history (statistics use all of it).
        days: Window length; thresholds' ``default_days`` when ``None``.
        as_of: Reference day, defaults to today.
        thresholds: Optional (partial) thresholds.

    Returns:
        :class:`LoadZoneResult` with one entry per day and the number of
        consecutive ``danger`` days ending on ``as_of``.
    """
    loads = list(loads)
    if days is None:
        days = resolve_thresholds(thresholds).default_days
    window = trailing_window(as_of or datetime.date.today(), days)

    positive = [entry.training_load for entry in loads if entry.training_load > 0]
    if len(positive) < MIN_LOADS_FOR_ZONES:
        recent = sorted(in_window(loads, window), key=lambda entry: entry.date)
        return LoadZoneResult(days=[LoadZoneDay(date=entry.date, training_load=entry.training_load, zone="optimal")
                                    for entry in recent], danger_streak=0, )

    mean = statistics.fmean(positive)
    stdev = statistics.pstdev(positive, mu=mean)

    daily_totals: dict[datetime.date, float] = { }
    for entry in loads:
        daily_totals[entry.date] = daily_totals.get(entry.date, 0.0) + entry.training_load

    zone_days = []
    day = window.start
    while day <= window.end:
        total = daily_totals.get(day, 0.0)
        zone_days.append(LoadZoneDay(date=day, training_load=total, zone=_classify_load(total, mean, stdev)))
        day += datetime.timedelta(days=1)

    danger_streak = 0
    for zone_day in reversed(zone_days):
        if zone_day.zone != "danger":
            break
        danger_streak += 1

    logger.debug("Load zones %s..%s: mean=%.1f sd=%.1f danger_streak=%d", window.start, window.end, mean, stdev,
                 danger_streak, )
    return LoadZoneResult(days=zone_days, danger_streak=danger_streak)
