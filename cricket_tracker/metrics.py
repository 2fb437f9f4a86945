# cricket_tracker/metrics.py
from __future__ import annotations

from cricket_tracker import cricket_math
from cricket_tracker.models import DerivedMetrics, Totals


def batting_average(totals: Totals) -> float:
    """
    runs / outs (2 dp).
    Never dismissed -> the raw run total, not infinity.
    """
    if not totals.outs:
        return float(totals.runs)
    return cricket_math.round_half_up(totals.runs / totals.outs, 2)


def strike_rate(totals: Totals) -> float:
    return cricket_math.strike_rate(totals.runs, totals.balls)


def economy(totals: Totals) -> float:
    return cricket_math.economy(totals.runs_conceded, totals.bowl_balls)


def boundary_pct(totals: Totals) -> float:
    """Share of runs scored in 4s and 6s (1 dp)."""
    boundary_runs = totals.fours * 4 + totals.sixes * 6
    return cricket_math.percentage(boundary_runs, totals.runs)


def dot_pct(totals: Totals) -> float:
    return cricket_math.percentage(totals.dots, totals.balls)


def derive_metrics(totals: Totals) -> DerivedMetrics:
    return DerivedMetrics(
        batting_average=batting_average(totals),
        strike_rate=strike_rate(totals),
        economy=economy(totals),
        boundary_pct=boundary_pct(totals),
        dot_pct=dot_pct(totals),
    )
