"""Builders shared across test modules."""

from __future__ import annotations

from typing import Any, Dict

from cricket_tracker.models import MatchRecord
from cricket_tracker.normalizer import normalize_record


def make_raw(**overrides: Any) -> Dict[str, Any]:
    """A wire-format record with every stat zeroed; override what the test needs."""
    raw: Dict[str, Any] = {
        "id": "r1",
        "date": "2024-05-01",
        "format": "ODI",
        "dismissal": "Not Out",
    }
    raw.update(overrides)
    return raw


def make_record(**overrides: Any) -> MatchRecord:
    return normalize_record(make_raw(**overrides))
