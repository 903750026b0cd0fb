"""
Injury summaries for the injury dashboard.

Groups are keyed on the exact stored value and returned by descending
count.  Groups with the same count keep the order in which their first
record appeared (the sort is stable).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from app.schemas.injury import Injury
from app.schemas.summary import InjurySummary, InjuryTypeSummary

logger = logging.getLogger(__name__)

UNKNOWN_REGION = "Unknown"


def compute_injury_summary_by_body_region(injuries: Iterable[Injury]) -> list[InjurySummary]:
    """Count injuries and sum days lost per body region.

    ``days_lost=None`` contributes 0; the record still counts.
    """
    groups: dict[str, list[int]] = { }
    for injury in injuries:
        region = injury.body_region or UNKNOWN_REGION
        totals = groups.setdefault(region, [0, 0])
        totals[0] += 1
        totals[1] += injury.days_lost or 0

    summaries = [InjurySummary(body_region=region, count=count, days_lost=days_lost) for region, (count, days_lost)
                 in groups.items()]
    logger.debug("Injury summary: %d regions", len(summaries))
    return sorted(summaries, key=lambda s: s.count, reverse=True)


def compute_injury_summary_by_type(injuries: Iterable[Injury]) -> list[InjuryTypeSummary]:
    """Count injuries per type (``injury`` / ``illness``)."""
    counts: dict[str, int] = { }
    for injury in injuries:
        counts[injury.type] = counts.get(injury.type, 0) + 1

    summaries = [InjuryTypeSummary(type=kind, count=count) for kind, count in counts.items()]
    return sorted(summaries, key=lambda s: s.count, reverse=True)
