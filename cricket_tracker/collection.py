# cricket_tracker/collection.py
from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from cricket_tracker.normalizer import clean_text, normalize_record

logger = logging.getLogger(__name__)

RawRecord = Dict[str, Any]


def new_record_id() -> str:
    return str(uuid.uuid4())


def record_id(raw: object) -> str:
    """
    Id as the normalizer sees it: 7, "7" and " 7 " are all "7".
    Non-object entries have no id.
    """
    if not isinstance(raw, Mapping):
        return ""
    return clean_text(raw.get("id"))


def _objects(records: Sequence[Any]) -> List[RawRecord]:
    # hand-edited files can hold null/number entries; they carry no match data
    out: List[RawRecord] = []
    for r in records:
        if isinstance(r, Mapping):
            out.append(dict(r))
        else:
            logger.warning("dropping non-object entry from collection: %r", r)
    return out


def save_record(records: Sequence[Any], raw: Mapping[str, Any]) -> Tuple[List[RawRecord], RawRecord]:
    """
    Returns (NEW list with `raw` saved into it, the saved record).

    - No id: a fresh id is assigned and the record goes to the front (newest first).
    - Known id: replaced in place, position kept.
    - Unknown id: treated as new, keeps the given id.
    The saved form is the normalized record (ints, stable key order).
    """
    record = normalize_record(raw)
    if not record.id:
        record = replace(record, id=new_record_id())
    payload = record.to_dict()

    out = _objects(records)
    for idx, existing in enumerate(out):
        if record_id(existing) == record.id:
            out[idx] = payload
            return out, payload
    return [payload] + out, payload


def upsert_record(records: Sequence[Any], raw: Mapping[str, Any]) -> List[RawRecord]:
    updated, _ = save_record(records, raw)
    return updated


def delete_record(records: Sequence[Any], rid: str) -> List[RawRecord]:
    key = clean_text(rid)
    return [r for r in _objects(records) if record_id(r) != key]


def has_record(records: Sequence[Any], rid: str) -> bool:
    key = clean_text(rid)
    return bool(key) and any(record_id(r) == key for r in records)


def clear_records() -> List[RawRecord]:
    return []
