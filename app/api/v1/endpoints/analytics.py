"""
Analytics endpoints — ACWR risk, injury summaries, load trends, volume.

Every endpoint is a pure computation over the posted records; nothing is
read from or written to a store.
"""

import datetime

from fastapi import APIRouter, HTTPException, status

from app.analytics.alerts import compute_risk_alerts
from app.analytics.risk import compute_athlete_risk_indicators
from app.analytics.summaries import compute_injury_summary_by_body_region, compute_injury_summary_by_type
from app.analytics.thresholds import resolve_thresholds
from app.analytics.trends import compute_athlete_load_trends, compute_load_trends
from app.analytics.volume import compute_compliance_rate, compute_training_streaks, compute_weekly_volume_summary
from app.analytics.zones import compute_load_zones
from app.schemas.requests import (ComplianceRequest, InjuryRequest, LoadsRequest, LoadTrendRequest, LoadZoneRequest,
                                  RiskRequest, )
from app.schemas.risk import RiskReport
from app.schemas.summary import InjurySummary, InjuryTypeSummary
from app.schemas.trends import LoadTrend, LoadZoneResult
from app.schemas.volume import ComplianceRate, TrainingStreaks, WeeklyVolumeSummary

router = APIRouter()


@router.post("/risk", summary="ACWR risk indicators and alerts for a squad.", response_model=RiskReport, )
def get_risk_report(data: RiskRequest):
    as_of = data.as_of or datetime.date.today()
    thresholds = resolve_thresholds(data.thresholds)
    indicators = compute_athlete_risk_indicators(data.athletes, data.daily_loads, data.injuries, thresholds,
                                                 as_of=as_of, )
    alerts = compute_risk_alerts(indicators, thresholds, as_of=as_of)
    return RiskReport(indicators=indicators, alerts=alerts)


@router.post("/injuries/regions", summary="Injury counts and days lost per body region.",
             response_model=list[InjurySummary], )
def get_injuries_by_region(data: InjuryRequest):
    return compute_injury_summary_by_body_region(data.injuries)


@router.post("/injuries/types", summary="Injury counts per type.", response_model=list[InjuryTypeSummary], )
def get_injuries_by_type(data: InjuryRequest):
    return compute_injury_summary_by_type(data.injuries)


@router.post("/load-trends", summary="Team daily averages or per-session athlete trend.",
             response_model=list[LoadTrend], )
def get_load_trends(data: LoadTrendRequest):
    loads = data.daily_loads
    if data.athlete_id is not None:
        loads = [load for load in loads if load.athlete_id == data.athlete_id]

    if not data.athlete_level:
        return compute_load_trends(loads, days=data.days, as_of=data.as_of, thresholds=data.thresholds)

    athlete_ids = { load.athlete_id for load in loads }
    if len(athlete_ids) > 1:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                            detail=("Athlete-level trends need loads of a single athlete; "
                                    f"got {len(athlete_ids)}. Pass 'athlete_id' to select one."), )
    return compute_athlete_load_trends(loads, days=data.days, as_of=data.as_of, thresholds=data.thresholds)


@router.post("/weekly-volume", summary="Current week versus previous week.", response_model=WeeklyVolumeSummary, )
def get_weekly_volume(data: LoadsRequest):
    return compute_weekly_volume_summary(data.daily_loads, data.thresholds, as_of=data.as_of)


@router.post("/streaks", summary="Current and longest training streaks.", response_model=TrainingStreaks, )
def get_training_streaks(data: LoadsRequest):
    return compute_training_streaks(data.daily_loads, as_of=data.as_of)


@router.post("/compliance", summary="Logged sessions against the weekly plan.", response_model=ComplianceRate, )
def get_compliance(data: ComplianceRequest):
    return compute_compliance_rate(data.daily_loads, data.sessions_per_week, as_of=data.as_of)


@router.post("/load-zones", summary="Daily load zones over the trailing window.", response_model=LoadZoneResult, )
def get_load_zones(data: LoadZoneRequest):
    return compute_load_zones(data.daily_loads, days=data.days, as_of=data.as_of, thresholds=data.thresholds)
