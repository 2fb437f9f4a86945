import json

from cricket_tracker.engine import analyze
from cricket_tracker.insights import FALLBACK
from cricket_tracker.models import DerivedMetrics, SkillScores, Totals
from tests.helpers import make_raw, make_record


class TestAnalyzeEmpty:
    def test_everything_zero_and_fallback(self) -> None:
        report = analyze([])
        assert report.totals == Totals()
        assert report.metrics == DerivedMetrics()
        assert report.skills == SkillScores()
        assert report.insights == [FALLBACK]
        assert report.run_trend == []
        assert report.dismissal_breakdown == []
        assert [b.count for b in report.scoring_breakdown] == [0] * 6
        assert report.overs_bowled == "0.0"


class TestAnalyze:
    def _raws(self):
        return [
            make_raw(id="2", date="2024-02-01", format="T20", runs="45", balls="30", fours="4",
                     sixes="2", dots="8", dismissal="Caught", overs="4", runsConceded="32", wickets="2"),
            make_raw(id="1", date="2024-01-15", format="T20", runs="12", balls="10", fours="1",
                     dots="4", dismissal="Not Out", bowlBalls="20", overs="9.9", runsConceded="18"),
        ]

    def test_accepts_raw_dicts(self) -> None:
        report = analyze(self._raws())
        assert report.totals.matches == 2
        assert report.totals.runs == 57
        assert report.totals.bowl_balls == 44
        assert report.overs_bowled == "7.2"

    def test_metrics(self) -> None:
        m = analyze(self._raws()).metrics
        # 57 runs, 1 out
        assert m.batting_average == 57.0
        assert m.strike_rate == 142.5
        # 50 runs off 44 balls
        assert m.economy == 6.82
        # 4*5 + 6*2 = 32 of 57
        assert m.boundary_pct == 56.1
        assert m.dot_pct == 30.0

    def test_trend_is_date_ordered(self) -> None:
        report = analyze(self._raws())
        assert [p.date for p in report.run_trend] == ["2024-01-15", "2024-02-01"]
        assert [p.runs for p in report.run_trend] == [12, 45]
        assert [p.strike_rate for p in report.run_trend] == [120.0, 150.0]

    def test_same_result_for_records_and_dicts(self) -> None:
        raws = self._raws()
        assert analyze(raws) == analyze([make_record(**r) for r in raws])

    def test_does_not_mutate_input(self) -> None:
        raws = self._raws()
        before = json.dumps(raws)
        analyze(raws)
        assert json.dumps(raws) == before

    def test_to_dict_is_json_ready(self) -> None:
        d = analyze(self._raws()).to_dict()
        json.dumps(d)
        assert set(d) == {
            "totals", "overs_bowled", "metrics", "run_trend", "bowling_trend",
            "dismissal_breakdown", "scoring_breakdown", "skills", "insights",
        }
        assert d["dismissal_breakdown"] == [{"name": "Caught", "count": 1}, {"name": "Not Out", "count": 1}]
        assert d["insights"][0]["area"] == "Shot Selection"
