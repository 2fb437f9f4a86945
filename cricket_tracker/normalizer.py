# cricket_tracker/normalizer.py
from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Mapping

from cricket_tracker.cricket_math import to_int
from cricket_tracker.models import INT_FIELDS, TEXT_FIELDS, WIRE_KEYS, MatchRecord

_SEP_RE = re.compile(r"[\s\-_]+")


def category_key(value: object) -> str:
    """
    Comparison key for categorical text:
    "Not Out", "not-out", "NOT_OUT" -> "not out"
    """
    if value is None:
        return ""
    return _SEP_RE.sub(" ", str(value)).strip().lower()


def _lookup(raw: Mapping[str, Any], name: str) -> Any:
    # camelCase wire key first, snake_case attribute name as fallback
    wire = WIRE_KEYS[name]
    if wire in raw:
        return raw[wire]
    return raw.get(name)


def clean_text(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


def normalize_record(raw: Mapping[str, Any]) -> MatchRecord:
    """
    Raw record (partial, textual, messy) -> MatchRecord.

    Rules:
      - numeric fields: non-negative ints, anything unparseable -> 0
      - text fields: stripped strings, missing -> ""
      - overs: original string form kept for ball derivation
    Never raises for bad values.
    """
    if not isinstance(raw, Mapping):
        raw = {}

    values: Dict[str, Any] = {}
    for name in INT_FIELDS:
        values[name] = to_int(_lookup(raw, name))
    for name in TEXT_FIELDS:
        values[name] = clean_text(_lookup(raw, name))

    overs = _lookup(raw, "overs")
    values["overs"] = "" if overs is None else str(overs).strip()

    return MatchRecord(**values)


def normalize_records(raws: Iterable[Mapping[str, Any]]) -> List[MatchRecord]:
    return [r if isinstance(r, MatchRecord) else normalize_record(r) for r in raws]
