"""
Training volume schemas: week-over-week comparison, streaks, compliance.
"""

from typing import Optional

from pydantic import BaseModel, Field


class WeekSummary(BaseModel):
    """Volume of one 7-day window."""

    sessions: int = Field(..., ge=0)
    total_load: float
    avg_rpe: float = Field(..., description="Mean RPE (1 decimal), 0 when there were no sessions")


class VolumeChanges(BaseModel):
    """Percent change current vs previous week (None when previous is 0)."""

    sessions_percent: Optional[int] = None
    load_percent: Optional[int] = None
    rpe_percent: Optional[int] = None


class WeeklyVolumeSummary(BaseModel):
    """Current week compared with the week before."""

    current_week: WeekSummary
    previous_week: WeekSummary
    changes: VolumeChanges
    load_spike_alert: bool = Field(False, description="Load increase above the configured spike percent", )


class TrainingStreaks(BaseModel):
    """Consecutive training-day streaks."""

    current_streak: int = Field(0, ge=0)
    longest_streak: int = Field(0, ge=0)


class ComplianceRate(BaseModel):
    """Logged sessions against the planned weekly frequency."""

    weekly_target: int
    weekly_actual: int
    weekly_percent: int = Field(..., ge=0, le=100)
    monthly_target: int
    monthly_actual: int
    monthly_percent: int = Field(..., ge=0, le=100)
