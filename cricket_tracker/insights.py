# cricket_tracker/insights.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from cricket_tracker.cricket_math import fmt_number
from cricket_tracker.models import DerivedMetrics, Insight, MatchRecord, Totals
from cricket_tracker.normalizer import category_key

T20_SR_BENCHMARK = 100
HIGH_DOT_PCT = 45
LOW_BOUNDARY_PCT = 35
CAUGHT_SHARE = 0.4
BOWLED_LBW_SHARE = 0.3
T20_DEATH_ECONOMY = 8.5
EXTRAS_RATE = 0.05
# four overs without a wicket
WICKETLESS_BALLS = 24
RECENT_INNINGS = 3


@dataclass(frozen=True)
class InsightContext:
    records: Sequence[MatchRecord]
    # same records, ascending by date
    series: Sequence[MatchRecord]
    totals: Totals
    metrics: DerivedMetrics

    def has_format(self, fmt: str) -> bool:
        key = category_key(fmt)
        return any(category_key(r.format) == key for r in self.records)

    def dismissal_count(self, kind: str) -> int:
        key = category_key(kind)
        return sum(1 for r in self.records if category_key(r.dismissal) == key)

    def dismissal_share(self, *kinds: str) -> float:
        if not self.records:
            return 0.0
        return sum(self.dismissal_count(k) for k in kinds) / len(self.records)


@dataclass(frozen=True)
class Rule:
    area: str
    # returns the message when the rule fires, else None
    check: Callable[[InsightContext], Optional[str]]


def _recent_form(ctx: InsightContext) -> Optional[str]:
    if len(ctx.series) < RECENT_INNINGS:
        return None
    last = ctx.series[-RECENT_INNINGS:]
    avg = sum(r.runs for r in last) / RECENT_INNINGS
    return f"Last 3 innings avg: {avg:.1f}"


def _t20_strike_rate(ctx: InsightContext) -> Optional[str]:
    if ctx.metrics.strike_rate < T20_SR_BENCHMARK and ctx.has_format("T20"):
        return (
            "Strike rate is below T20 benchmark (100). "
            "Focus on rotating strike and boundary options early."
        )
    return None


def _dot_balls(ctx: InsightContext) -> Optional[str]:
    if ctx.metrics.dot_pct > HIGH_DOT_PCT:
        return (
            f"High dot ball percentage ({fmt_number(ctx.metrics.dot_pct)}%). "
            "Work on singles placement & quick calls."
        )
    return None


def _boundaries(ctx: InsightContext) -> Optional[str]:
    if ctx.metrics.boundary_pct < LOW_BOUNDARY_PCT and ctx.has_format("T20"):
        return (
            f"Boundary % is {fmt_number(ctx.metrics.boundary_pct)}%. "
            "Add power-hitting drills (range-hitting, strong base)."
        )
    return None


def _caught(ctx: InsightContext) -> Optional[str]:
    if ctx.dismissal_share("Caught") > CAUGHT_SHARE:
        return "Many dismissals are caught. Reassess lofted shots & play later under the eyes."
    return None


def _bowled_lbw(ctx: InsightContext) -> Optional[str]:
    if ctx.dismissal_share("LBW", "Bowled") > BOWLED_LBW_SHARE:
        return (
            "LBW/Bowled frequency suggests gap between bat & pad. "
            "Drill: straight-bat, shadow practice, front-foot defense."
        )
    return None


def _death_bowling(ctx: InsightContext) -> Optional[str]:
    if ctx.has_format("T20") and ctx.metrics.economy > T20_DEATH_ECONOMY:
        return (
            f"Economy {fmt_number(ctx.metrics.economy)} in T20. "
            "Work on yorkers, wide yorkers, and change-ups at the death."
        )
    return None


def _extras(ctx: InsightContext) -> Optional[str]:
    if not ctx.totals.bowl_balls:
        return None
    extras = ctx.totals.wides + ctx.totals.no_balls
    if extras / ctx.totals.bowl_balls > EXTRAS_RATE:
        return "High extras rate. Groove run-up, release point; target cone drills."
    return None


def _wicketless(ctx: InsightContext) -> Optional[str]:
    if ctx.totals.wickets == 0 and ctx.totals.bowl_balls > WICKETLESS_BALLS:
        return "Low wicket-taking. Try attacking fields early; vary length & pace more."
    return None


def _fielding(ctx: InsightContext) -> Optional[str]:
    if ctx.totals.drops > ctx.totals.catches:
        return "Drops exceed catches. Practice high catches and reaction drills."
    return None


# Evaluation order is output order. Every rule runs; none suppresses another.
RULES: List[Rule] = [
    Rule("Batting", _recent_form),
    Rule("Batting", _t20_strike_rate),
    Rule("Batting", _dot_balls),
    Rule("Batting", _boundaries),
    Rule("Shot Selection", _caught),
    Rule("Technique", _bowled_lbw),
    Rule("Bowling", _death_bowling),
    Rule("Discipline", _extras),
    Rule("Bowling", _wicketless),
    Rule("Fielding", _fielding),
]

FALLBACK = Insight(
    area="Overall",
    message="Good balance so far. Keep logging matches for sharper insights.",
)


def build_insights(ctx: InsightContext, rules: Sequence[Rule] = RULES) -> List[Insight]:
    out: List[Insight] = []
    for rule in rules:
        message = rule.check(ctx)
        if message is not None:
            out.append(Insight(area=rule.area, message=message))

    if not out:
        out.append(FALLBACK)
    return out
