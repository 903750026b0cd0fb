"""
Athlete schema.

Athletes are owned by the record store; the analytics layer only reads
their identity and display name.
"""

from typing import Literal, Optional

from pydantic import Field

from app.schemas.common import RecordModel


class Athlete(RecordModel):
    """An athlete as supplied by the data-access layer."""

    id: str = Field(..., description="Record-store identifier")
    name: str = Field("", description="Display name (empty if unknown)")
    sport_id: Optional[str] = Field(None, description="Sport the athlete belongs to")
    status: Literal["active", "inactive"] = Field("active", description="Roster status")
