"""Tests for daily load zones."""

import datetime

from app.analytics.zones import _classify_load, compute_load_zones
from app.schemas.daily_load import DailyLoad

AS_OF = datetime.date(2026, 3, 15)


def _make_load(days_ago: int, training_load: float, idx: int = 0) -> DailyLoad:
    return DailyLoad(
        id=f"dl-{days_ago}-{idx}",
        athlete_id="ath-1",
        date=AS_OF - datetime.timedelta(days=days_ago),
        training_load=training_load,
        rpe=5,
    )


class TestClassifyLoad:
    def test_bands(self):
        assert _classify_load(0, 100, 20) == "rest"
        assert _classify_load(70, 100, 20) == "low"
        assert _classify_load(80, 100, 20) == "optimal"
        assert _classify_load(120, 100, 20) == "optimal"
        assert _classify_load(140, 100, 20) == "high"
        assert _classify_load(141, 100, 20) == "danger"


class TestLoadZones:
    def _loads(self):
        # mean 190, population sd 270 -> danger above 730
        return [_make_load(d, 100) for d in range(1, 10)] + [_make_load(0, 1000)]

    def test_one_entry_per_day(self):
        result = compute_load_zones(self._loads(), days=14, as_of=AS_OF)

        assert len(result.days) == 14
        assert result.days[0].date == AS_OF - datetime.timedelta(days=13)
        assert result.days[-1].date == AS_OF

    def test_zones_and_danger_streak(self):
        result = compute_load_zones(self._loads(), days=14, as_of=AS_OF)
        zones = [d.zone for d in result.days]

        assert zones[:4] == ["rest"] * 4
        assert zones[4:13] == ["optimal"] * 9
        assert zones[-1] == "danger"
        assert result.danger_streak == 1

    def test_same_day_sessions_summed(self):
        loads = self._loads() + [_make_load(1, 50, idx=1)]
        result = compute_load_zones(loads, days=3, as_of=AS_OF)
        assert result.days[-2].training_load == 150

    def test_danger_streak_zero_when_today_not_danger(self):
        loads = [_make_load(d, 100) for d in range(2, 11)] + [_make_load(1, 1000)]
        result = compute_load_zones(loads, days=14, as_of=AS_OF)
        assert result.days[-1].zone == "rest"
        assert result.danger_streak == 0

    def test_few_loads_returned_as_optimal(self):
        loads = [_make_load(3, 500), _make_load(1, 100)]
        result = compute_load_zones(loads, days=14, as_of=AS_OF)

        assert [d.date for d in result.days] == [
            AS_OF - datetime.timedelta(days=3),
            AS_OF - datetime.timedelta(days=1),
        ]
        assert all(d.zone == "optimal" for d in result.days)
        assert result.danger_streak == 0

    def test_few_loads_window_holds_exactly_days_days(self):
        loads = [_make_load(6, 500), _make_load(7, 100)]
        result = compute_load_zones(loads, days=7, as_of=AS_OF)
        assert [d.training_load for d in result.days] == [500]

    def test_default_days_from_thresholds(self):
        result = compute_load_zones(self._loads(), as_of=AS_OF, thresholds={"default_days": 7})
        assert len(result.days) == 7

    def test_empty_input(self):
        result = compute_load_zones([], days=7, as_of=AS_OF)
        assert result.days == []
        assert result.danger_streak == 0
