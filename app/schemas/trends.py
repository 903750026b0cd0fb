"""
Load trend and load-zone schemas.

Zones classify a day's summed load against the athlete's own history:

- ``rest``     — no load
- ``low``      — below mean - 1 SD
- ``optimal``  — within mean ± 1 SD
- ``high``     — up to mean + 2 SD
- ``danger``   — above mean + 2 SD
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

LoadZone = Literal["rest", "low", "optimal", "high", "danger"]


class LoadTrend(BaseModel):
    """One point of a load trend series."""

    date: datetime.date
    training_load: float
    rpe: float
    athlete_name: Optional[str] = Field(None, description="Set on per-session (athlete-level) series only")


class LoadZoneDay(BaseModel):
    """Summed load and zone for one calendar day."""

    date: datetime.date
    training_load: float
    zone: LoadZone


class LoadZoneResult(BaseModel):
    """Daily zones over the trailing window."""

    days: list[LoadZoneDay]
    danger_streak: int = Field(0, ge=0, description="Consecutive danger days ending on the reference day")
