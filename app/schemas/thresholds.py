"""
Alerting threshold schemas.

Risk tiers are derived from the ACWR with two configurable cut points:

- ``low``       — ACWR <= acwr_moderate
- ``moderate``  — acwr_moderate < ACWR <= acwr_high
- ``high``      — ACWR > acwr_high

A value sitting exactly on a threshold belongs to the lower band.
``acwr_moderate < acwr_high`` is expected but not enforced.
"""

from typing import Optional

from pydantic import Field

from app.schemas.common import RecordModel


class ThresholdSettings(RecordModel):
    """Complete threshold configuration (every field has a default)."""

    acwr_moderate: float = Field(1.3, description="Upper bound of the low-risk band")
    acwr_high: float = Field(1.5, description="Upper bound of the moderate-risk band")
    load_spike_percent: float = Field(50.0, description="Week-over-week load increase (%) flagged as a spike", )
    default_days: int = Field(30, description="Default trailing window (days) for trend views")


class ThresholdOverrides(RecordModel):
    """Partial thresholds as sent by a caller; missing fields use defaults."""

    acwr_moderate: Optional[float] = None
    acwr_high: Optional[float] = None
    load_spike_percent: Optional[float] = None
    default_days: Optional[int] = Field(None, ge=1)
