"""
Risk alerts.

At most one alert per indicator:

- ``danger``  — ACWR above ``acwr_high``
- ``warning`` — ACWR above ``acwr_moderate`` and up to ``acwr_high``

Alerts describe the present state, so they carry the reference day of
the call.  They keep the order of the input indicators.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable
from typing import Optional

from app.analytics.thresholds import ThresholdsInput, resolve_thresholds
from app.schemas.risk import RiskAlert, RiskIndicator

logger = logging.getLogger(__name__)


def _alert_for(indicator: RiskIndicator, high: float, moderate: float, day: datetime.date) -> Optional[RiskAlert]:
    name = indicator.athlete_name or indicator.athlete_id
    if indicator.acwr > high:
        return RiskAlert(athlete_name=indicator.athlete_name,
                         message=f"{name}: ACWR at {indicator.acwr:.2f}, high injury risk", severity="danger",
                         date=day, )
    if indicator.acwr > moderate:
        return RiskAlert(athlete_name=indicator.athlete_name,
                         message=f"{name}: ACWR at {indicator.acwr:.2f}, moderate risk, monitor closely",
                         severity="warning", date=day, )
    return None


def compute_risk_alerts(indicators: Iterable[RiskIndicator], thresholds: Optional[ThresholdsInput] = None,
                        as_of: Optional[datetime.date] = None, ) -> list[RiskAlert]:
    """Emit alerts for indicators above the moderate threshold."""
    cfg = resolve_thresholds(thresholds)
    day = as_of or datetime.date.today()

    alerts = []
    for indicator in indicators:
        alert = _alert_for(indicator, cfg.acwr_high, cfg.acwr_moderate, day)
        if alert is not None:
            alerts.append(alert)

    if alerts:
        logger.info("Raised %d risk alerts (%d danger)", len(alerts), sum(1 for a in alerts if a.severity == "danger"))
    return alerts
