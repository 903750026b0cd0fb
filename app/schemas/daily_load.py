"""
Daily training-load schema.

One record per training session.  ``training_load`` is computed upstream
(conventionally RPE × duration in minutes) and treated as an opaque
intensity unit by the analytics layer.
"""

from typing import Optional

from pydantic import Field

from app.schemas.common import CalendarDay, RecordModel


class DailyLoad(RecordModel):
    """A single session load entry."""

    id: str
    athlete_id: str
    athlete_name: Optional[str] = None
    date: CalendarDay = Field(..., description="Session day (time of day ignored)")
    training_load: float = Field(..., description="Session load, e.g. RPE x duration")
    rpe: float = Field(..., description="Rate of perceived exertion, 1-10")
    duration_minutes: float = Field(0.0, description="Session duration in minutes")
    session_type: str = Field("training", description="Free-text session category")
