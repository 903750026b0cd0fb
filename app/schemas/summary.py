"""Injury summary schemas."""

from pydantic import BaseModel, Field


class InjurySummary(BaseModel):
    """Injuries grouped by body region."""

    body_region: str
    count: int = Field(..., ge=0)
    days_lost: int = Field(..., description="Sum of days lost, missing values count as 0")


class InjuryTypeSummary(BaseModel):
    """Injuries grouped by type (injury / illness)."""

    type: str
    count: int = Field(..., ge=0)
