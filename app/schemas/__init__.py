"""Pydantic schemas for records, analytics results and request bodies."""

from app.schemas.athlete import Athlete
from app.schemas.daily_load import DailyLoad
from app.schemas.injury import Injury
from app.schemas.thresholds import ThresholdOverrides, ThresholdSettings
from app.schemas.risk import RiskAlert, RiskIndicator, RiskReport
from app.schemas.summary import InjurySummary, InjuryTypeSummary
from app.schemas.trends import LoadTrend, LoadZoneDay, LoadZoneResult
from app.schemas.volume import (
    ComplianceRate,
    TrainingStreaks,
    VolumeChanges,
    WeeklyVolumeSummary,
    WeekSummary,
)

__all__ = [
    "Athlete",
    "DailyLoad",
    "Injury",
    "ThresholdOverrides",
    "ThresholdSettings",
    "RiskAlert",
    "RiskIndicator",
    "RiskReport",
    "InjurySummary",
    "InjuryTypeSummary",
    "LoadTrend",
    "LoadZoneDay",
    "LoadZoneResult",
    "ComplianceRate",
    "TrainingStreaks",
    "VolumeChanges",
    "WeeklyVolumeSummary",
    "WeekSummary",
]
