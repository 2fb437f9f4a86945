# cricket_tracker/engine.py
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Union

from cricket_tracker.aggregator import aggregate
from cricket_tracker.config import DEBUG_PIPELINE
from cricket_tracker.cricket_math import balls_to_overs
from cricket_tracker.insights import InsightContext, build_insights
from cricket_tracker.metrics import derive_metrics
from cricket_tracker.models import AnalyticsReport, MatchRecord
from cricket_tracker.normalizer import normalize_records
from cricket_tracker.skills import skill_scores
from cricket_tracker.trends import (
    bowling_trend,
    dismissal_breakdown,
    run_trend,
    scoring_breakdown,
    sort_by_date,
)

logger = logging.getLogger(__name__)

RecordLike = Union[MatchRecord, Mapping[str, Any]]


def analyze(records: Iterable[RecordLike]) -> AnalyticsReport:
    """
    Full pass over a snapshot of the collection:
      normalize -> totals -> metrics/skills, series -> trends/breakdowns,
      then insights from all of the above.

    Holds no state between calls; the caller re-runs it after every edit.
    """
    normalized = tuple(normalize_records(records))
    series = tuple(sort_by_date(normalized))

    totals = aggregate(normalized)
    metrics = derive_metrics(totals)
    if DEBUG_PIPELINE:
        logger.debug("totals=%s metrics=%s", totals, metrics)

    skills = skill_scores(totals, metrics)
    insights = build_insights(
        InsightContext(records=normalized, series=series, totals=totals, metrics=metrics)
    )

    logger.debug("analyzed %d records -> %d insights", len(normalized), len(insights))

    return AnalyticsReport(
        totals=totals,
        overs_bowled=balls_to_overs(totals.bowl_balls),
        metrics=metrics,
        run_trend=run_trend(series),
        bowling_trend=bowling_trend(series),
        dismissal_breakdown=dismissal_breakdown(normalized),
        scoring_breakdown=scoring_breakdown(normalized),
        skills=skills,
        insights=insights,
    )
