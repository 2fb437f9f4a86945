# cricket_tracker/trends.py
from __future__ import annotations

from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from cricket_tracker import cricket_math
from cricket_tracker.models import (
    UNKNOWN_DISMISSAL,
    BowlingTrendPoint,
    BreakdownItem,
    MatchRecord,
    TrendPoint,
)
from cricket_tracker.normalizer import category_key


def parse_date(value: str) -> Optional[date]:
    """
    Accepts "2024-05-01" or a full ISO timestamp. Anything else -> None.
    """
    s = (value or "").strip()
    if not s:
        return None
    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(s[:10])
    except ValueError:
        return None


def _sort_key(record: MatchRecord) -> Tuple[int, date]:
    d = parse_date(record.date)
    # undated / unparseable records go after every dated one
    if d is None:
        return (1, date.min)
    return (0, d)


def sort_by_date(records: Iterable[MatchRecord]) -> List[MatchRecord]:
    """Ascending by date; sorted() is stable so ties keep input order."""
    return sorted(records, key=_sort_key)


def format_date(value: str) -> str:
    d = parse_date(value)
    return d.isoformat() if d is not None else (value or "")


def run_trend(series: Sequence[MatchRecord]) -> List[TrendPoint]:
    """
    One point per record of an already date-sorted series (1-based index).
    Strike rate is per record, never cumulative.
    """
    return [
        TrendPoint(
            index=i,
            date=format_date(r.date),
            runs=r.runs,
            strike_rate=cricket_math.strike_rate(r.runs, r.balls),
        )
        for i, r in enumerate(series, start=1)
    ]


def bowling_trend(series: Sequence[MatchRecord]) -> List[BowlingTrendPoint]:
    return [
        BowlingTrendPoint(
            index=i,
            date=format_date(r.date),
            wickets=r.wickets,
            economy=cricket_math.economy(
                r.runs_conceded,
                cricket_math.effective_bowling_balls(r.bowl_balls, r.overs),
            ),
        )
        for i, r in enumerate(series, start=1)
    ]


def dismissal_breakdown(records: Iterable[MatchRecord]) -> List[BreakdownItem]:
    """
    Tally per dismissal kind in order of first occurrence.
    Blank -> "Unknown". Spelling variants ("Not Out" / "Not-Out") share one
    bucket labelled with the first spelling seen.
    """
    labels: Dict[str, str] = {}
    counts: Dict[str, int] = {}
    for r in records:
        label = r.dismissal or UNKNOWN_DISMISSAL
        key = category_key(label)
        if key not in counts:
            labels[key] = label
            counts[key] = 0
        counts[key] += 1
    return [BreakdownItem(name=labels[k], count=counts[k]) for k in counts]


SCORING_CATEGORIES: List[Tuple[str, str]] = [
    ("1s", "singles"),
    ("2s", "doubles"),
    ("3s", "triples"),
    ("4s", "fours"),
    ("6s", "sixes"),
    ("Dots", "dots"),
]


def scoring_breakdown(records: Iterable[MatchRecord]) -> List[BreakdownItem]:
    """Always all six categories, fixed order, zeros included."""
    sums = {attr: 0 for _, attr in SCORING_CATEGORIES}
    for r in records:
        for attr in sums:
            sums[attr] += getattr(r, attr)
    return [BreakdownItem(name=name, count=sums[attr]) for name, attr in SCORING_CATEGORIES]
