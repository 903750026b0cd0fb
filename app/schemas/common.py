"""
Shared schema building blocks.

Records arrive from the record store with camelCase keys and with dates
that are sometimes full ISO timestamps (``2024-06-01T00:00:00.000Z``).
Both are normalised here so the analytics layer only ever sees
snake_case fields and plain calendar days.
"""

import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def _to_calendar_day(value: Any) -> Any:
    """Drop any time-of-day component, keeping the day as written."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, str):
        return value.strip().split("T", 1)[0].split(" ", 1)[0]
    return value


# A date compared by calendar day only (no time, no timezone shift).
CalendarDay = Annotated[datetime.date, BeforeValidator(_to_calendar_day)]


class RecordModel(BaseModel):
    """Base for inbound records: accepts snake_case and camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
