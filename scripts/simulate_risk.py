"""Simulate squad risk indicators over a synthetic 6-week block.

Four athlete profiles are generated (steady, ramp-up, spike, returning
from injury) and the ACWR table is printed once per week, followed by
the alerts and the injury summary on the last day.

Usage:
    python scripts/simulate_risk.py
"""

import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.analytics import (
    compute_athlete_risk_indicators,
    compute_injury_summary_by_body_region,
    compute_risk_alerts,
)
from app.schemas import Athlete, DailyLoad, Injury

END_DATE = datetime.date(2026, 3, 1)
WEEKS = 6
RPE = 6.0
DURATION = 75.0

# ─── Weekly sessions per profile: one tuple per week, oldest first ─────
PROFILES = {
    "ath-steady": ("Steady Sam", [4, 4, 4, 4, 4, 4]),
    "ath-ramp": ("Ramp Rita", [3, 3, 4, 4, 5, 5]),
    "ath-spike": ("Spike Simon", [3, 3, 3, 3, 3, 7]),
    "ath-return": ("Returning Rosa", [0, 0, 1, 2, 3, 5]),
}

INJURIES = [
    Injury(id="inj-1", athlete_id="ath-return", body_region="Hamstring", status="active", days_lost=None),
    Injury(id="inj-2", athlete_id="ath-return", body_region="Hamstring", status="resolved", days_lost=21),
    Injury(id="inj-3", athlete_id="ath-spike", type="illness", body_region="Respiratory", status="resolved",
           days_lost=4),
]


def _build_loads() -> list[DailyLoad]:
    start = END_DATE - datetime.timedelta(days=WEEKS * 7 - 1)
    loads = []
    for athlete_id, (name, weekly_sessions) in PROFILES.items():
        for week, sessions in enumerate(weekly_sessions):
            week_start = start + datetime.timedelta(days=week * 7)
            for i in range(sessions):
                loads.append(DailyLoad(id=f"{athlete_id}-{week}-{i}", athlete_id=athlete_id, athlete_name=name,
                                       date=week_start + datetime.timedelta(days=i), rpe=RPE,
                                       duration_minutes=DURATION, training_load=RPE * DURATION, ))
    return loads


def main() -> None:
    athletes = [Athlete(id=athlete_id, name=name) for athlete_id, (name, _) in PROFILES.items()]
    loads = _build_loads()

    print("=" * 90)
    print(f"{'Date':<12} {'Athlete':<16} {'Acute':>8} {'Chronic':>9} {'ACWR':>6}  {'Risk':<9} {'Trajectory'}")
    print("=" * 90)

    check_date = END_DATE - datetime.timedelta(days=(WEEKS - 1) * 7)
    while check_date <= END_DATE:
        for ind in compute_athlete_risk_indicators(athletes, loads, INJURIES, as_of=check_date):
            print(f"{check_date.isoformat():<12} {ind.athlete_name:<16} {ind.acute_load:>8.0f} "
                  f"{ind.chronic_load:>9.1f} {ind.acwr:>6.2f}  {ind.risk_level:<9} {ind.trajectory}")
        print("-" * 90)
        check_date += datetime.timedelta(days=7)

    indicators = compute_athlete_risk_indicators(athletes, loads, INJURIES, as_of=END_DATE)

    print()
    print(f"ALERTS (as of {END_DATE})")
    for alert in compute_risk_alerts(indicators, as_of=END_DATE):
        print(f"  [{alert.severity.upper():<7}] {alert.message}")

    print()
    print("INJURIES BY REGION")
    for row in compute_injury_summary_by_body_region(INJURIES):
        print(f"  {row.body_region:<14} count={row.count}  days_lost={row.days_lost}")


if __name__ == "__main__":
    main()
