"""Tests for risk alert generation."""

import datetime

import pytest

from app.analytics.alerts import compute_risk_alerts
from app.schemas.risk import RiskIndicator

AS_OF = datetime.date(2026, 3, 15)


def _indicator(acwr: float, athlete_id: str = "ath-1", name: str = "Ann", risk_level: str = "low") -> RiskIndicator:
    return RiskIndicator(
        athlete_id=athlete_id,
        athlete_name=name,
        acute_load=0,
        chronic_load=0,
        acwr=acwr,
        risk_level=risk_level,
    )


class TestRiskAlerts:
    @pytest.mark.parametrize(
        "acwr, severity",
        [
            (2.0, "danger"),
            (1.51, "danger"),
            (1.5, "warning"),
            (1.4, "warning"),
            (1.3, None),
            (1.0, None),
            (0.0, None),
        ],
    )
    def test_severity_by_acwr(self, acwr, severity):
        alerts = compute_risk_alerts([_indicator(acwr)], as_of=AS_OF)
        if severity is None:
            assert alerts == []
        else:
            assert [a.severity for a in alerts] == [severity]

    def test_keeps_input_order(self):
        indicators = [
            _indicator(1.4, "a", "Ann"),
            _indicator(0.9, "b", "Ben"),
            _indicator(2.0, "c", "Cat"),
        ]
        alerts = compute_risk_alerts(indicators, as_of=AS_OF)
        assert [a.athlete_name for a in alerts] == ["Ann", "Cat"]
        assert [a.severity for a in alerts] == ["warning", "danger"]

    def test_message_and_date(self):
        [alert] = compute_risk_alerts([_indicator(2.0, name="Ann")], as_of=AS_OF)
        assert "Ann" in alert.message
        assert "2.00" in alert.message
        assert alert.date == AS_OF

    def test_nameless_athlete_uses_id_in_message(self):
        [alert] = compute_risk_alerts([_indicator(1.4, athlete_id="ath-9", name="")], as_of=AS_OF)
        assert alert.athlete_name == ""
        assert alert.message.startswith("ath-9")

    def test_custom_thresholds(self):
        custom = {"acwr_moderate": 1.1, "acwr_high": 1.3}
        assert [a.severity for a in compute_risk_alerts([_indicator(1.2)], custom, as_of=AS_OF)] == ["warning"]
        assert [a.severity for a in compute_risk_alerts([_indicator(1.35)], custom, as_of=AS_OF)] == ["danger"]

    def test_uses_acwr_not_stored_risk_level(self):
        [alert] = compute_risk_alerts([_indicator(1.6, risk_level="low")], as_of=AS_OF)
        assert alert.severity == "danger"

    def test_empty_input(self):
        assert compute_risk_alerts([], as_of=AS_OF) == []
