"""
Analytics request bodies.

The service holds no records: callers post the athletes, loads and
injuries they already fetched, plus optional reference day and partial
thresholds.  Keys may be snake_case or camelCase.
"""

import datetime
from typing import Optional

from pydantic import Field

from app.schemas.athlete import Athlete
from app.schemas.common import RecordModel
from app.schemas.daily_load import DailyLoad
from app.schemas.injury import Injury
from app.schemas.thresholds import ThresholdOverrides


class AnalyticsRequest(RecordModel):
    """Fields shared by every analytics request."""

    as_of: Optional[datetime.date] = Field(None, description="Reference day (defaults to today)")
    thresholds: Optional[ThresholdOverrides] = Field(None, description="Partial thresholds; missing fields use defaults", )


class RiskRequest(AnalyticsRequest):
    athletes: list[Athlete]
    daily_loads: list[DailyLoad] = Field(default_factory=list)
    injuries: list[Injury] = Field(default_factory=list)


class InjuryRequest(RecordModel):
    injuries: list[Injury] = Field(default_factory=list)


class LoadsRequest(AnalyticsRequest):
    daily_loads: list[DailyLoad] = Field(default_factory=list)


class LoadTrendRequest(LoadsRequest):
    days: Optional[int] = Field(None, ge=1, description="Trailing window in days (thresholds' default_days if unset)", )
    athlete_level: bool = Field(False, description="Return every session instead of daily averages")
    athlete_id: Optional[str] = Field(None, description="Restrict loads to one athlete")


class LoadZoneRequest(LoadsRequest):
    days: Optional[int] = Field(None, ge=1)


class ComplianceRequest(LoadsRequest):
    sessions_per_week: int = Field(5, ge=0, le=21, description="Planned sessions per week")
