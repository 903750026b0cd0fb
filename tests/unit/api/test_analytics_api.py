"""HTTP tests for the analytics endpoints."""

import datetime
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.api.v1.endpoints import analytics as analytics_endpoints
from app.main import app

AS_OF = datetime.date(2026, 3, 15)
PREFIX = "/api/v1/analytics"


@pytest.fixture
def client():
    return TestClient(app)


def _load(days_ago: int, training_load: float, athlete_id: str = "ath-1", rpe: float = 5) -> dict:
    day = AS_OF - datetime.timedelta(days=days_ago)
    return {
        "id": f"dl-{athlete_id}-{days_ago}",
        "athleteId": athlete_id,
        "date": f"{day.isoformat()}T00:00:00.000Z",
        "trainingLoad": training_load,
        "rpe": rpe,
    }


class TestServiceEndpoints:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["message"] == "Athlete Risk API"


class TestRiskEndpoint:
    def test_risk_report(self, client):
        loads = [_load(i, 500 if i < 7 else 200) for i in range(28)]
        payload = {
            "asOf": AS_OF.isoformat(),
            "athletes": [{"id": "ath-1", "name": "Ann"}, {"id": "ath-2", "name": "Ben"}],
            "dailyLoads": loads,
            "injuries": [{"id": "inj-1", "athleteId": "ath-2", "bodyRegion": "Knee", "status": "active"}],
        }
        response = client.post(f"{PREFIX}/risk", json=payload)
        assert response.status_code == 200

        body = response.json()
        first, second = body["indicators"]
        assert first["athlete_id"] == "ath-1"
        assert first["acwr"] == 1.82
        assert first["risk_level"] == "high"
        assert second["acwr"] == 0
        assert second["active_injuries"] == 1

        [alert] = body["alerts"]
        assert alert["severity"] == "danger"
        assert alert["athlete_name"] == "Ann"
        assert alert["date"] == AS_OF.isoformat()

    def test_partial_thresholds(self, client):
        loads = [_load(i, 500 if i < 7 else 200) for i in range(28)]
        payload = {
            "asOf": AS_OF.isoformat(),
            "athletes": [{"id": "ath-1", "name": "Ann"}],
            "dailyLoads": loads,
            "thresholds": {"acwrHigh": 2.0},
        }
        body = client.post(f"{PREFIX}/risk", json=payload).json()
        assert body["indicators"][0]["risk_level"] == "moderate"
        assert body["alerts"][0]["severity"] == "warning"

    def test_missing_as_of_reads_clock_once(self, client, monkeypatch):
        calls = []

        class _SteppingDate(datetime.date):
            @classmethod
            def today(cls):
                calls.append(1)
                return AS_OF + datetime.timedelta(days=len(calls) - 1)

        monkeypatch.setattr(analytics_endpoints, "datetime", SimpleNamespace(date=_SteppingDate))
        loads = [_load(i, 500 if i < 7 else 200) for i in range(28)]
        payload = {"athletes": [{"id": "ath-1", "name": "Ann"}], "dailyLoads": loads}

        body = client.post(f"{PREFIX}/risk", json=payload).json()

        assert len(calls) == 1
        assert body["indicators"][0]["acwr"] == 1.82
        assert body["alerts"][0]["date"] == AS_OF.isoformat()

    def test_non_numeric_load_is_rejected(self, client):
        bad = _load(0, 100)
        bad["trainingLoad"] = "heavy"
        response = client.post(f"{PREFIX}/risk", json={"athletes": [{"id": "ath-1"}], "dailyLoads": [bad]})
        assert response.status_code == 422


class TestInjuryEndpoints:
    def test_regions(self, client):
        injuries = [
            {"id": "1", "athleteId": "a", "bodyRegion": "Knee", "daysLost": 10},
            {"id": "2", "athleteId": "a", "bodyRegion": "Knee", "daysLost": None},
            {"id": "3", "athleteId": "b", "bodyRegion": "Ankle", "daysLost": 3},
        ]
        response = client.post(f"{PREFIX}/injuries/regions", json={"injuries": injuries})
        assert response.status_code == 200
        assert response.json() == [
            {"body_region": "Knee", "count": 2, "days_lost": 10},
            {"body_region": "Ankle", "count": 1, "days_lost": 3},
        ]

    def test_types(self, client):
        injuries = [{"id": "1", "athleteId": "a", "type": "illness"}]
        response = client.post(f"{PREFIX}/injuries/types", json={"injuries": injuries})
        assert response.json() == [{"type": "illness", "count": 1}]


class TestLoadTrendEndpoint:
    def test_team_average(self, client):
        payload = {"asOf": AS_OF.isoformat(), "days": 7, "dailyLoads": [_load(0, 300, "a"), _load(0, 500, "b")]}
        body = client.post(f"{PREFIX}/load-trends", json=payload).json()
        assert body == [{"date": AS_OF.isoformat(), "training_load": 400, "rpe": 5, "athlete_name": None}]

    def test_athlete_level_rejects_mixed_athletes(self, client):
        payload = {
            "asOf": AS_OF.isoformat(),
            "athleteLevel": True,
            "dailyLoads": [_load(0, 300, "a"), _load(0, 500, "b")],
        }
        response = client.post(f"{PREFIX}/load-trends", json=payload)
        assert response.status_code == 400

    def test_athlete_level_with_filter(self, client):
        payload = {
            "asOf": AS_OF.isoformat(),
            "athleteLevel": True,
            "athleteId": "b",
            "dailyLoads": [_load(0, 300, "a"), _load(1, 500, "b"), _load(0, 700, "b")],
        }
        response = client.post(f"{PREFIX}/load-trends", json=payload)
        assert response.status_code == 200
        assert [t["training_load"] for t in response.json()] == [500, 700]


class TestVolumeEndpoints:
    def test_weekly_volume(self, client):
        payload = {"asOf": AS_OF.isoformat(), "dailyLoads": [_load(0, 400), _load(8, 200)]}
        body = client.post(f"{PREFIX}/weekly-volume", json=payload).json()
        assert body["changes"]["load_percent"] == 100
        assert body["load_spike_alert"] is True

    def test_streaks(self, client):
        payload = {"asOf": AS_OF.isoformat(), "dailyLoads": [_load(1, 100), _load(2, 100)]}
        body = client.post(f"{PREFIX}/streaks", json=payload).json()
        assert body == {"current_streak": 2, "longest_streak": 2}

    def test_compliance(self, client):
        payload = {"asOf": AS_OF.isoformat(), "sessionsPerWeek": 2, "dailyLoads": [_load(0, 100)]}
        body = client.post(f"{PREFIX}/compliance", json=payload).json()
        assert body["weekly_target"] == 2
        assert body["weekly_percent"] == 50

    def test_load_zones(self, client):
        loads = [_load(d, 100) for d in range(1, 10)] + [_load(0, 1000)]
        payload = {"asOf": AS_OF.isoformat(), "days": 14, "dailyLoads": loads}
        body = client.post(f"{PREFIX}/load-zones", json=payload).json()
        assert len(body["days"]) == 14
        assert body["danger_streak"] == 1
