"""
Load trend series.

Both builders keep the records of the last ``days`` calendar days,
``as_of`` included.  When ``days`` is not given the thresholds'
``default_days`` is used.

- :func:`compute_load_trends` averages all athletes per day (team view);
  the mean load is rounded to an integer and the mean RPE to one
  decimal.
- :func:`compute_athlete_load_trends` returns every session as-is, for
  single-athlete detail views.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable
from typing import Optional

from app.analytics.rounding import round_half_up
from app.analytics.thresholds import ThresholdsInput, resolve_thresholds
from app.analytics.windows import DateWindow, in_window, trailing_window
from app.schemas.daily_load import DailyLoad
from app.schemas.trends import LoadTrend

logger = logging.getLogger(__name__)


def _trend_window(days: Optional[int], as_of: Optional[datetime.date],
                  thresholds: Optional[ThresholdsInput], ) -> DateWindow:
    if days is None:
        days = resolve_thresholds(thresholds).default_days
    return trailing_window(as_of or datetime.date.today(), days)


def compute_load_trends(loads: Iterable[DailyLoad], days: Optional[int] = None, as_of: Optional[datetime.date] = None,
                        thresholds: Optional[ThresholdsInput] = None, ) -> list[LoadTrend]:
    """Daily mean load and RPE across all athletes, ascending by date."""
    window = _trend_window(days, as_of, thresholds)

    by_date: dict[datetime.date, list[DailyLoad]] = { }
    for load in in_window(loads, window):
        by_date.setdefault(load.date, []).append(load)

    trends = []
    for day in sorted(by_date):
        day_loads = by_date[day]
        count = len(day_loads)
        trends.append(LoadTrend(date=day,
                                training_load=round_half_up(sum(entry.training_load for entry in day_loads) / count),
                                rpe=round_half_up(sum(entry.rpe for entry in day_loads) / count, 1), ))

    logger.debug("Load trends %s..%s: %d days", window.start, window.end, len(trends))
    return trends


def compute_athlete_load_trends(loads: Iterable[DailyLoad], days: Optional[int] = None,
                                as_of: Optional[datetime.date] = None,
                                thresholds: Optional[ThresholdsInput] = None, ) -> list[LoadTrend]:
    """One point per session, ascending by date (same-day order kept)."""
    window = _trend_window(days, as_of, thresholds)
    recent = sorted(in_window(loads, window), key=lambda entry: entry.date)
    return [LoadTrend(date=entry.date, training_load=entry.training_load, rpe=entry.rpe,
                      athlete_name=entry.athlete_name, ) for entry in recent]
