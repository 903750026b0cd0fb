"""
Rolling load windows.

All windows are **inclusive calendar-day ranges ending on a reference
day** (``as_of``).  Records are matched on their calendar date only, so
the time of day or timezone offset of a stored timestamp never moves a
session into a neighbouring window.  Records dated after ``as_of`` are
outside every window.

    acute window    as_of - 6  … as_of      (7 days)
    chronic window  as_of - 27 … as_of      (28 days)
    trend window    as_of - (days-1) … as_of

The chronic sum is divided by the number of weeks it spans, so both
loads are expressed as "load per 7-day period".
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable
from typing import NamedTuple, Optional

from app.schemas.daily_load import DailyLoad

logger = logging.getLogger(__name__)

ACUTE_DAYS = 7
CHRONIC_DAYS = 28
CHRONIC_WEEKS = CHRONIC_DAYS / 7.0


class DateWindow(NamedTuple):
    """Inclusive ``[start, end]`` range of calendar days."""

    start: datetime.date
    end: datetime.date

    def contains(self, day: datetime.date) -> bool:
        return self.start <= day <= self.end

    def previous(self) -> DateWindow:
        """The same-length window immediately before this one."""
        length = self.end - self.start + datetime.timedelta(days=1)
        return DateWindow(self.start - length, self.end - length)


class WindowLoads(NamedTuple):
    """Acute and weekly-equivalent chronic load for one athlete."""

    acute_load: float
    chronic_load: float


def trailing_window(as_of: datetime.date, days: int) -> DateWindow:
    """Window of *days* calendar days ending on (and including) *as_of*."""
    return DateWindow(as_of - datetime.timedelta(days=days - 1), as_of)


def in_window(loads: Iterable[DailyLoad], window: DateWindow) -> list[DailyLoad]:
    return [load for load in loads if window.contains(load.date)]


def sum_training_load(loads: Iterable[DailyLoad], window: DateWindow) -> float:
    """Sum ``training_load`` of the records inside *window* (0 if none)."""
    return sum((load.training_load for load in loads if window.contains(load.date)), 0.0)


def compute_window_loads(loads: Iterable[DailyLoad], as_of: datetime.date,
                         athlete_id: Optional[str] = None, ) -> WindowLoads:
    """Compute acute and chronic load as of *as_of*.

    Args:
        loads: Load records; filtered to *athlete_id* when given.
        as_of: Reference day (last day of both windows).
        athlete_id: Optional athlete filter.

    Returns:
        :class:`WindowLoads` with the 7-day sum and the 28-day sum / 4.
    """
    if athlete_id is not None:
        loads = [load for load in loads if load.athlete_id == athlete_id]
    else:
        loads = list(loads)

    acute_window = trailing_window(as_of, ACUTE_DAYS)
    chronic_window = trailing_window(as_of, CHRONIC_DAYS)

    acute = sum_training_load(loads, acute_window)
    chronic = sum_training_load(loads, chronic_window) / CHRONIC_WEEKS

    logger.debug("Window loads athlete=%s acute=%s..%s chronic=%s..%s -> %.2f / %.2f", athlete_id, acute_window.start,
                 acute_window.end, chronic_window.start, chronic_window.end, acute, chronic, )
    return WindowLoads(acute_load=acute, chronic_load=chronic)
