"""
Risk indicator and alert schemas.

Indicators are recomputed on every request and never stored.  All
loads are expressed per 7-day period so acute and chronic values are
directly comparable.
"""

import datetime
from typing import Literal

from pydantic import BaseModel, Field

RiskLevel = Literal["low", "moderate", "high"]
Trajectory = Literal["improving", "stable", "worsening"]
AlertSeverity = Literal["warning", "danger"]


class RiskIndicator(BaseModel):
    """ACWR-based injury-risk indicator for one athlete."""

    athlete_id: str
    athlete_name: str = ""
    acute_load: float = Field(..., description="Load summed over the last 7 days")
    chronic_load: float = Field(..., description="28-day load divided by 4 (weekly equivalent)")
    acwr: float = Field(..., ge=0.0, description="acute / chronic, 0 when chronic is 0")
    risk_level: RiskLevel
    active_injuries: int = Field(0, ge=0, description="Open injuries for this athlete")
    trajectory: Trajectory = Field("stable", description="Direction of this week's load versus the previous week", )


class RiskAlert(BaseModel):
    """Alert raised for an athlete above the moderate ACWR threshold."""

    athlete_name: str
    message: str
    severity: AlertSeverity
    date: datetime.date


class RiskReport(BaseModel):
    """Indicators plus the alerts derived from them."""

    indicators: list[RiskIndicator]
    alerts: list[RiskAlert]
