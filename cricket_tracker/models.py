# cricket_tracker/models.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


# -----------------------------
# Enumerated defaults (free text is still accepted everywhere)
# -----------------------------
DEFAULT_FORMATS = ["T20", "ODI", "Test", "T10", "Street/Box", "Practice"]
MATCH_TYPES = ["League", "Friendly", "Net Session", "Tournament", "Practice Match"]
DISMISSALS = [
    "Not Out",
    "Bowled",
    "LBW",
    "Caught",
    "Run Out",
    "Stumped",
    "Hit Wicket",
    "Retired Hurt",
]

UNKNOWN_DISMISSAL = "Unknown"


# -----------------------------
# Canonical MatchRecord
# -----------------------------
@dataclass(frozen=True)
class MatchRecord:
    id: str = ""

    # Context
    date: str = ""
    time: str = ""
    format: str = ""
    match_type: str = ""
    venue: str = ""

    # Batting
    runs: int = 0
    balls: int = 0
    singles: int = 0
    doubles: int = 0
    triples: int = 0
    fours: int = 0
    sixes: int = 0
    dots: int = 0
    dismissal: str = ""
    batting_notes: str = ""

    # Bowling (overs kept in "W.B" notation; bowl_balls wins when non-zero)
    overs: str = ""
    bowl_balls: int = 0
    runs_conceded: int = 0
    wickets: int = 0
    maidens: int = 0
    wides: int = 0
    no_balls: int = 0
    bowling_notes: str = ""

    # Fielding
    catches: int = 0
    run_outs: int = 0
    drops: int = 0
    misfields: int = 0
    fielding_notes: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Wire form: camelCase keys in stable order."""
        return {WIRE_KEYS[name]: value for name, value in asdict(self).items()}


# attribute name -> wire key (definition order of MatchRecord)
WIRE_KEYS: Dict[str, str] = {
    "id": "id",
    "date": "date",
    "time": "time",
    "format": "format",
    "match_type": "matchType",
    "venue": "venue",
    "runs": "runs",
    "balls": "balls",
    "singles": "singles",
    "doubles": "doubles",
    "triples": "triples",
    "fours": "fours",
    "sixes": "sixes",
    "dots": "dots",
    "dismissal": "dismissal",
    "batting_notes": "battingNotes",
    "overs": "overs",
    "bowl_balls": "bowlBalls",
    "runs_conceded": "runsConceded",
    "wickets": "wickets",
    "maidens": "maidens",
    "wides": "wides",
    "no_balls": "noBalls",
    "bowling_notes": "bowlingNotes",
    "catches": "catches",
    "run_outs": "runOuts",
    "drops": "drops",
    "misfields": "misfields",
    "fielding_notes": "fieldingNotes",
}

INT_FIELDS = (
    "runs", "balls", "singles", "doubles", "triples", "fours", "sixes", "dots",
    "bowl_balls", "runs_conceded", "wickets", "maidens", "wides", "no_balls",
    "catches", "run_outs", "drops", "misfields",
)
TEXT_FIELDS = (
    "id", "date", "time", "format", "match_type", "venue", "dismissal",
    "batting_notes", "bowling_notes", "fielding_notes",
)


# -----------------------------
# Aggregates
# -----------------------------
@dataclass(frozen=True)
class Totals:
    """
    Sums across the whole collection.
    Bowling is stored as BALLS (not float overs), same as the NRR aggregates.
    """
    matches: int = 0

    runs: int = 0
    balls: int = 0
    outs: int = 0
    singles: int = 0
    doubles: int = 0
    triples: int = 0
    fours: int = 0
    sixes: int = 0
    dots: int = 0

    wickets: int = 0
    bowl_balls: int = 0
    runs_conceded: int = 0
    maidens: int = 0
    wides: int = 0
    no_balls: int = 0

    catches: int = 0
    run_outs: int = 0
    drops: int = 0
    misfields: int = 0


@dataclass(frozen=True)
class DerivedMetrics:
    batting_average: float = 0.0
    strike_rate: float = 0.0
    economy: float = 0.0
    boundary_pct: float = 0.0
    dot_pct: float = 0.0


# -----------------------------
# Trends & breakdowns
# -----------------------------
@dataclass(frozen=True)
class TrendPoint:
    index: int
    date: str
    runs: int
    strike_rate: float


@dataclass(frozen=True)
class BowlingTrendPoint:
    index: int
    date: str
    wickets: int
    economy: float


@dataclass(frozen=True)
class BreakdownItem:
    name: str
    count: int


# -----------------------------
# Skill radar
# -----------------------------
@dataclass(frozen=True)
class SkillScores:
    run_volume: int = 0
    strike_rate: int = 0
    rotation: int = 0
    power: int = 0
    wicket_threat: int = 0
    economy: int = 0
    fielding: int = 0


@dataclass(frozen=True)
class Insight:
    area: str
    message: str


@dataclass(frozen=True)
class AnalyticsReport:
    totals: Totals
    overs_bowled: str
    metrics: DerivedMetrics
    run_trend: List[TrendPoint] = field(default_factory=list)
    bowling_trend: List[BowlingTrendPoint] = field(default_factory=list)
    dismissal_breakdown: List[BreakdownItem] = field(default_factory=list)
    scoring_breakdown: List[BreakdownItem] = field(default_factory=list)
    skills: SkillScores = field(default_factory=SkillScores)
    insights: List[Insight] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
