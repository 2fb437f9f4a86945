# cricket_tracker/aggregator.py
from __future__ import annotations

from typing import Iterable

from cricket_tracker.cricket_math import effective_bowling_balls
from cricket_tracker.models import MatchRecord, Totals
from cricket_tracker.normalizer import category_key

NOT_OUT = "not out"


def is_out(record: MatchRecord) -> bool:
    """A blank dismissal is not counted as out."""
    key = category_key(record.dismissal)
    return bool(key) and key != NOT_OUT


def aggregate(records: Iterable[MatchRecord]) -> Totals:
    """
    Single pass over the collection. Pure sums/counts, so the result does not
    depend on record order. Empty collection -> all-zero Totals.
    """
    t = dict.fromkeys(Totals.__dataclass_fields__, 0)

    for r in records:
        t["matches"] += 1

        # Batting
        t["runs"] += r.runs
        t["balls"] += r.balls
        t["outs"] += 1 if is_out(r) else 0
        t["singles"] += r.singles
        t["doubles"] += r.doubles
        t["triples"] += r.triples
        t["fours"] += r.fours
        t["sixes"] += r.sixes
        t["dots"] += r.dots

        # Bowling
        t["wickets"] += r.wickets
        t["bowl_balls"] += effective_bowling_balls(r.bowl_balls, r.overs)
        t["runs_conceded"] += r.runs_conceded
        t["maidens"] += r.maidens
        t["wides"] += r.wides
        t["no_balls"] += r.no_balls

        # Fielding
        t["catches"] += r.catches
        t["run_outs"] += r.run_outs
        t["drops"] += r.drops
        t["misfields"] += r.misfields

    return Totals(**t)
