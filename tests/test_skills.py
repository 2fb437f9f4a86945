from cricket_tracker.models import DerivedMetrics, SkillScores, Totals
from cricket_tracker.skills import (
    economy_score,
    fielding_score,
    power_score,
    rotation_score,
    run_volume_score,
    skill_scores,
    strike_rate_score,
    wicket_threat_score,
)


class TestRunVolume:
    def test_mean_runs_doubled(self) -> None:
        assert run_volume_score(Totals(matches=4, runs=100)) == 50

    def test_saturates(self) -> None:
        assert run_volume_score(Totals(matches=1, runs=75)) == 100

    def test_half_rounds_up(self) -> None:
        # 2.25 * 2 = 4.5
        assert run_volume_score(Totals(matches=4, runs=9)) == 5


class TestStrikeRateScore:
    def test_rounded(self) -> None:
        assert strike_rate_score(DerivedMetrics(strike_rate=87.6)) == 88

    def test_saturates_at_100(self) -> None:
        assert strike_rate_score(DerivedMetrics(strike_rate=200.0)) == 100


class TestRotation:
    def test_inverse_of_dot_pct(self) -> None:
        assert rotation_score(Totals(balls=40), DerivedMetrics(dot_pct=44.7)) == 55

    def test_no_balls_faced(self) -> None:
        assert rotation_score(Totals(), DerivedMetrics()) == 0


class TestPower:
    def test_scaled(self) -> None:
        assert power_score(DerivedMetrics(boundary_pct=50.0)) == 60

    def test_clamped_high(self) -> None:
        assert power_score(DerivedMetrics(boundary_pct=100.0)) == 100

    def test_never_negative(self) -> None:
        assert power_score(DerivedMetrics(boundary_pct=0.0)) == 0


class TestWicketThreat:
    def test_no_bowling(self) -> None:
        assert wicket_threat_score(Totals(wickets=3)) == 0

    def test_wicket_every_over(self) -> None:
        # SR 6 -> 100 - 20
        assert wicket_threat_score(Totals(bowl_balls=24, wickets=4)) == 80

    def test_wicketless_floors_at_zero(self) -> None:
        assert wicket_threat_score(Totals(bowl_balls=60, wickets=0)) == 0


class TestEconomyScore:
    def test_formula(self) -> None:
        assert economy_score(Totals(bowl_balls=24), DerivedMetrics(economy=6.0)) == 52

    def test_poor_economy_floors_at_zero(self) -> None:
        assert economy_score(Totals(bowl_balls=6), DerivedMetrics(economy=20.0)) == 0

    def test_zero_economy_caps_at_100(self) -> None:
        assert economy_score(Totals(bowl_balls=6), DerivedMetrics(economy=0.0)) == 100

    def test_no_bowling(self) -> None:
        assert economy_score(Totals(), DerivedMetrics()) == 0


class TestFielding:
    def test_formula(self) -> None:
        assert fielding_score(Totals(catches=3, run_outs=1, drops=1, misfields=1)) == 30

    def test_clamped_low(self) -> None:
        assert fielding_score(Totals(drops=4)) == 0

    def test_clamped_high(self) -> None:
        assert fielding_score(Totals(catches=15)) == 100


class TestSkillScores:
    def test_empty_all_zero(self) -> None:
        assert skill_scores(Totals(), DerivedMetrics()) == SkillScores()

    def test_every_axis_in_range(self) -> None:
        s = skill_scores(
            Totals(matches=1, runs=300, balls=50, bowl_balls=6, wickets=0, drops=9),
            DerivedMetrics(strike_rate=600.0, dot_pct=0.0, boundary_pct=99.0, economy=30.0),
        )
        for value in vars(s).values():
            assert 0 <= value <= 100


class TestSingleDisciplineLogs:
    def test_bowling_only_log_scores_zero_rotation(self) -> None:
        totals = Totals(matches=1, bowl_balls=24, runs_conceded=24)
        metrics = DerivedMetrics(economy=6.0)
        assert rotation_score(totals, metrics) == 0
        assert economy_score(totals, metrics) == 52

    def test_batting_only_log_scores_zero_economy(self) -> None:
        totals = Totals(matches=1, runs=20, balls=20, dots=5)
        metrics = DerivedMetrics(dot_pct=25.0)
        assert economy_score(totals, metrics) == 0
        assert rotation_score(totals, metrics) == 75
