# cricket_tracker/transfer.py
from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import pandas as pd

from cricket_tracker import cricket_math
from cricket_tracker.normalizer import normalize_record

logger = logging.getLogger(__name__)


class ImportPayloadError(ValueError):
    """Raised when an import payload is not a JSON array of record objects."""
    pass


def parse_import_payload(payload: Union[str, bytes]) -> List[Dict[str, Any]]:
    """
    JSON text -> list of raw records, kept verbatim (no normalization, key order kept).
    Anything other than an array of objects is rejected as a whole.
    """
    try:
        data = json.loads(payload)
    except (TypeError, ValueError) as e:
        logger.info("import rejected: not JSON (%s)", e)
        raise ImportPayloadError("Could not parse JSON file.") from e

    if not isinstance(data, list):
        logger.info("import rejected: payload is %s, not an array", type(data).__name__)
        raise ImportPayloadError("Invalid file: expected an array of entries.")

    for i, item in enumerate(data):
        if not isinstance(item, dict):
            logger.info("import rejected: entry %d is %s", i, type(item).__name__)
            raise ImportPayloadError(f"Invalid file: entry {i} is not an object.")

    return data


def export_json(records: Sequence[Mapping[str, Any]]) -> str:
    """Pretty-printed, records and their key order untouched."""
    return json.dumps(list(records), indent=2, ensure_ascii=False)


def export_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"cricket_tracker_{today.isoformat()}.json"


TABLE_COLUMNS = [
    "Date", "Format", "Type", "Runs", "Balls", "SR", "Dismissal",
    "Overs", "Runs Conceded", "Wkts", "Econ", "Catches",
]


def records_table(records: Sequence[Mapping[str, Any]]) -> pd.DataFrame:
    """
    Match log as a table (one row per record, input order).
    Overs shows the entered notation, else the ball count rendered as overs, else "-".
    """
    rows = []
    for raw in records:
        r = normalize_record(raw)
        balls = cricket_math.effective_bowling_balls(r.bowl_balls, r.overs)
        if r.overs:
            overs = r.overs
        elif r.bowl_balls:
            overs = cricket_math.balls_to_overs(r.bowl_balls)
        else:
            overs = "-"
        rows.append([
            r.date,
            r.format,
            r.match_type,
            r.runs,
            r.balls,
            cricket_math.strike_rate(r.runs, r.balls),
            r.dismissal,
            overs,
            r.runs_conceded,
            r.wickets,
            cricket_math.economy(r.runs_conceded, balls),
            r.catches,
        ])
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def export_csv(records: Sequence[Mapping[str, Any]]) -> str:
    return records_table(records).to_csv(index=False)
