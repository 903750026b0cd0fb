"""
Injury / illness schema.
"""

from typing import Literal, Optional

from pydantic import Field

from app.schemas.common import CalendarDay, RecordModel


class Injury(RecordModel):
    """An injury or illness episode.

    ``days_lost`` is ``None`` while the episode is open or when it was never
    recorded; summaries count it as zero.
    """

    id: str
    athlete_id: str
    athlete_name: Optional[str] = None
    type: Literal["injury", "illness"] = "injury"
    body_region: str = Field("", description="Free-text anatomical label")
    status: Literal["active", "resolved"] = "active"
    date_occurred: Optional[CalendarDay] = None
    date_resolved: Optional[CalendarDay] = None
    days_lost: Optional[int] = Field(None, description="Training days lost (None = not recorded)")
