"""
Training volume widgets: week-over-week comparison, streaks, compliance.

All computations take the load records of one athlete (or of the whole
squad for team views) and a reference day ``as_of``.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from app.analytics.rounding import round_half_up
from app.analytics.thresholds import ThresholdsInput, resolve_thresholds
from app.analytics.windows import ACUTE_DAYS, DateWindow, in_window, trailing_window
from app.schemas.daily_load import DailyLoad
from app.schemas.volume import ComplianceRate, TrainingStreaks, VolumeChanges, WeeklyVolumeSummary, WeekSummary

logger = logging.getLogger(__name__)

COMPLIANCE_MONTH_DAYS = 30
DEFAULT_SESSIONS_PER_WEEK = 5

_ONE_DAY = datetime.timedelta(days=1)


def _percent_change(current: float, previous: float) -> Optional[int]:
    if previous == 0:
        return None
    return int(round_half_up((current - previous) / previous * 100.0))


def _week_summary(loads: Sequence[DailyLoad], window: DateWindow) -> WeekSummary:
    week = in_window(loads, window)
    if not week:
        return WeekSummary(sessions=0, total_load=0.0, avg_rpe=0.0)
    return WeekSummary(sessions=len(week), total_load=round_half_up(sum(entry.training_load for entry in week)),
                       avg_rpe=round_half_up(sum(entry.rpe for entry in week) / len(week), 1), )


# ======================================================================
# Week over week
# ======================================================================


def compute_weekly_volume_summary(loads: Iterable[DailyLoad], thresholds: Optional[ThresholdsInput] = None,
                                  as_of: Optional[datetime.date] = None, ) -> WeeklyVolumeSummary:
    """Compare the last 7 days with the 7 days before them.

    ``load_spike_alert`` is set when total load grew by more than the
    thresholds' ``load_spike_percent``.
    """
    cfg = resolve_thresholds(thresholds)
    loads = list(loads)
    current_window = trailing_window(as_of or datetime.date.today(), ACUTE_DAYS)

    current = _week_summary(loads, current_window)
    previous = _week_summary(loads, current_window.previous())

    changes = VolumeChanges(sessions_percent=_percent_change(current.sessions, previous.sessions),
                            load_percent=_percent_change(current.total_load, previous.total_load),
                            rpe_percent=_percent_change(current.avg_rpe, previous.avg_rpe), )
    spike = changes.load_percent is not None and changes.load_percent > cfg.load_spike_percent
    if spike:
        logger.info("Load spike: %+d%% week over week (limit %s%%)", changes.load_percent, cfg.load_spike_percent)

    return WeeklyVolumeSummary(current_week=current, previous_week=previous, changes=changes, load_spike_alert=spike, )


# ======================================================================
# Streaks
# ======================================================================


def compute_training_streaks(loads: Iterable[DailyLoad], as_of: Optional[datetime.date] = None, ) -> TrainingStreaks:
    """Current and longest runs of consecutive training days.

    The current streak may start yesterday: a day without a session yet
    does not break it.
    """
    days = { entry.date for entry in loads }
    if not days:
        return TrainingStreaks(current_streak=0, longest_streak=0)

    ref_day = as_of or datetime.date.today()
    cursor = ref_day if ref_day in days else ref_day - _ONE_DAY

    current = 0
    while cursor in days:
        current += 1
        cursor -= _ONE_DAY

    longest = 1
    run = 1
    ordered = sorted(days)
    for prev_day, day in zip(ordered, ordered[1:]):
        if day - prev_day == _ONE_DAY:
            run += 1
            longest = max(longest, run)
        else:
            run = 1

    return TrainingStreaks(current_streak=current, longest_streak=longest)


# ======================================================================
# Compliance
# ======================================================================


def _capped_percent(actual: int, target: int) -> int:
    if target <= 0:
        return 0
    return min(100, int(round_half_up(actual / target * 100.0)))


def compute_compliance_rate(loads: Iterable[DailyLoad], sessions_per_week: int = DEFAULT_SESSIONS_PER_WEEK,
                            as_of: Optional[datetime.date] = None, ) -> ComplianceRate:
    """Logged sessions against the planned weekly frequency.

    The monthly target scales the weekly plan to a 30-day window.
    """
    loads = list(loads)
    ref_day = as_of or datetime.date.today()

    weekly_actual = len(in_window(loads, trailing_window(ref_day, ACUTE_DAYS)))
    monthly_actual = len(in_window(loads, trailing_window(ref_day, COMPLIANCE_MONTH_DAYS)))
    monthly_target = int(round_half_up(sessions_per_week * COMPLIANCE_MONTH_DAYS / 7.0))

    return ComplianceRate(weekly_target=sessions_per_week, weekly_actual=weekly_actual,
                          weekly_percent=_capped_percent(weekly_actual, sessions_per_week),
                          monthly_target=monthly_target, monthly_actual=monthly_actual,
                          monthly_percent=_capped_percent(monthly_actual, monthly_target), )
