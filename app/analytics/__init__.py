"""Risk & load analytics: ACWR indicators, injury summaries, trends, alerts."""

from app.analytics.alerts import compute_risk_alerts
from app.analytics.risk import compute_acwr, compute_athlete_risk_indicators, compute_risk_level
from app.analytics.summaries import compute_injury_summary_by_body_region, compute_injury_summary_by_type
from app.analytics.thresholds import DEFAULT_THRESHOLDS, resolve_thresholds
from app.analytics.trends import compute_athlete_load_trends, compute_load_trends
from app.analytics.volume import compute_compliance_rate, compute_training_streaks, compute_weekly_volume_summary
from app.analytics.zones import compute_load_zones

__all__ = [
    "DEFAULT_THRESHOLDS",
    "resolve_thresholds",
    "compute_acwr",
    "compute_risk_level",
    "compute_athlete_risk_indicators",
    "compute_injury_summary_by_body_region",
    "compute_injury_summary_by_type",
    "compute_load_trends",
    "compute_athlete_load_trends",
    "compute_risk_alerts",
    "compute_weekly_volume_summary",
    "compute_training_streaks",
    "compute_compliance_rate",
    "compute_load_zones",
]
