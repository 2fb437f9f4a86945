# cricket_tracker/skills.py
from __future__ import annotations

from cricket_tracker.cricket_math import clamp_score, round_half_up
from cricket_tracker.models import DerivedMetrics, SkillScores, Totals

# Coaching heuristics, not calibrated stats. Keep the constants as they are.

# 50 runs a match fills the volume axis
RUN_VOLUME_FACTOR = 2
# 1 boundary-run % point is worth 1.2 score points; ~83% saturates
POWER_FACTOR = 1.2
# a wicket every 30 balls (5 overs) or worse scores 0
WICKET_THREAT_BALLS = 30
# each run per over costs 8 points; 12.5 an over scores 0
ECONOMY_PENALTY = 8
# per catch / run-out
FIELDING_SUCCESS_POINTS = 10
# per drop / misfield
FIELDING_ERROR_POINTS = 5


def run_volume_score(totals: Totals) -> int:
    mean_runs = totals.runs / max(1, totals.matches)
    return clamp_score(round_half_up(mean_runs * RUN_VOLUME_FACTOR))


def strike_rate_score(metrics: DerivedMetrics) -> int:
    # SR 100+ saturates
    return clamp_score(round_half_up(metrics.strike_rate))


def rotation_score(totals: Totals, metrics: DerivedMetrics) -> int:
    """100 - dot %. No balls faced (e.g. a bowling-only log) scores 0, not 100."""
    if not totals.balls:
        return 0
    return clamp_score(round_half_up(100 - metrics.dot_pct))


def power_score(metrics: DerivedMetrics) -> int:
    return clamp_score(round_half_up(metrics.boundary_pct * POWER_FACTOR))


def wicket_threat_score(totals: Totals) -> int:
    """Lower bowling strike rate (balls per wicket) -> higher score."""
    if not totals.bowl_balls:
        return 0
    bowling_sr = totals.bowl_balls / max(1, totals.wickets)
    return clamp_score(round_half_up(100 - min(100, bowling_sr / WICKET_THREAT_BALLS * 100)))


def economy_score(totals: Totals, metrics: DerivedMetrics) -> int:
    """100 - 8 per run an over. No balls bowled (e.g. a batting-only log) scores 0, not 100."""
    if not totals.bowl_balls:
        return 0
    return clamp_score(round_half_up(100 - metrics.economy * ECONOMY_PENALTY))


def fielding_score(totals: Totals) -> int:
    good = (totals.catches + totals.run_outs) * FIELDING_SUCCESS_POINTS
    bad = (totals.drops + totals.misfields) * FIELDING_ERROR_POINTS
    return clamp_score(good - bad)


def skill_scores(totals: Totals, metrics: DerivedMetrics) -> SkillScores:
    """Seven independent 0-100 radar axes."""
    return SkillScores(
        run_volume=run_volume_score(totals),
        strike_rate=strike_rate_score(metrics),
        rotation=rotation_score(totals, metrics),
        power=power_score(metrics),
        wicket_threat=wicket_threat_score(totals),
        economy=economy_score(totals, metrics),
        fielding=fielding_score(totals),
    )
